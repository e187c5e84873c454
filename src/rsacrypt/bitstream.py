"""Bit-granular access to byte buffers.

Blocks of the RSA transcoder are not byte-aligned, so they are packed back to back at single-bit granularity,
least-significant bit first within every byte.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class BitCursor:
    """A read/write position inside a byte buffer, addressable per bit.

    The position is a (byte, offset) pair with offset in `[0, 8)`. Every read or write advances it; once the offset
    reaches 8 it wraps to 0 and the byte pointer moves on.

    Writing ORs the bits into place, it never clears them. The buffer must therefore be zeroed wherever a write lands,
    `BitCursor.blank()` provides such a buffer.

    Attributes:
        buffer: The underlying buffer.
        pos: Index of the current byte.
        offset: Index of the current bit within that byte.
    """

    def __init__(self, buffer: bytes | bytearray) -> None:
        self.buffer = buffer
        self.pos = 0
        self.offset = 0

    @classmethod
    def blank(cls, size: int) -> "BitCursor":
        """Create a cursor over a fresh zero-filled buffer of `size` bytes."""
        return cls(bytearray(size))

    def tell(self) -> int:
        """Absolute bit position from the start of the buffer."""
        return self.pos * 8 + self.offset

    @property
    def bytes_used(self) -> int:
        """Number of bytes touched so far, counting a partially used byte."""
        return self.pos + (1 if self.offset else 0)

    def _check(self, nbits: int) -> None:
        if nbits < 0:
            raise ValueError("Bit count must be non-negative")
        if self.tell() + nbits > len(self.buffer) * 8:
            raise IndexError(f"Access of {nbits} bits at bit {self.tell()} exceeds buffer of {len(self.buffer)} bytes")

    def read(self, nbits: int) -> int:
        """Read `nbits` bits as an unsigned integer, least-significant bit first.

        Args:
            nbits: Number of bits to read.

        Returns:
            The value assembled from the bits.

        Raises:
            IndexError: If the read runs past the end of the buffer.
        """
        self._check(nbits)
        result = 0
        counter = 0
        while counter < nbits:
            take = min(8 - self.offset, nbits - counter)
            chunk = (self.buffer[self.pos] >> self.offset) & ((1 << take) - 1)
            result |= chunk << counter
            counter += take
            self._advance(take)
        return result

    def write(self, nbits: int, value: int) -> None:
        """Write the low `nbits` bits of `value`, least-significant bit first.

        Args:
            nbits: Number of bits to write.
            value: The value to write. Bits above `nbits` are ignored.

        Raises:
            IndexError: If the write runs past the end of the buffer.
        """
        self._check(nbits)
        counter = 0
        while counter < nbits:
            take = min(8 - self.offset, nbits - counter)
            chunk = (value >> counter) & ((1 << take) - 1)
            self.buffer[self.pos] |= chunk << self.offset
            counter += take
            self._advance(take)

    def _advance(self, nbits: int) -> None:
        self.offset += nbits
        if self.offset >= 8:
            self.offset = 0
            self.pos += 1
