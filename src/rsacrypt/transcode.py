"""File encryption and decryption with word-sized RSA.

The plaintext is cut into blocks one bit narrower than the modulus, so every block is guaranteed to be below `n`.
Each block is raised to the key exponent and stored with the full modulus width. Neither block width lines up with
byte boundaries, so the stored frame leads with the original byte count, which alone decides where the decrypted
output ends.

Frame layout:

    +----------------------------+-----------------------------------------------+
    | original length (8 bytes,  | ciphertext blocks, bitwidth(n) bits each,     |
    | unsigned, little endian)   | packed least-significant bit first            |
    +----------------------------+-----------------------------------------------+

Typical usage example:

    frame = encrypt_bytes(b"Hi there!", RSAPubKey(55, 3))
    clear = decrypt_bytes(frame, RSAPrivKey(55, 27))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import pathlib
import typing

from rsacrypt.bitstream import BitCursor
from rsacrypt.errors import CorruptedFile
from rsacrypt.rsa import RSAKey

LENGTH_FIELD_BYTES: int = 8
LENGTH_BYTEORDER: typing.Literal["little", "big"] = "little"
# Tolerance on top of one byte per plaintext block when checking the stored length, two 32-bit words.
PADDING_SLACK: int = 8

logger = logging.getLogger(__name__)


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


class Frame(typing.NamedTuple):
    """An encrypted file: the original byte count and the packed ciphertext blocks."""
    original_length: int
    payload: bytes

    def to_bytes(self) -> bytes:
        """Serialize the frame into its on-disk form."""
        return self.original_length.to_bytes(LENGTH_FIELD_BYTES, byteorder=LENGTH_BYTEORDER,
                                             signed=False) + self.payload

    @classmethod
    def from_bytes(cls, data: bytes) -> "Frame":
        """Parse the on-disk form of a frame.

        Raises:
            CorruptedFile: If the data is too short to hold the length field.
        """
        if len(data) < LENGTH_FIELD_BYTES:
            raise CorruptedFile("File is corrupted, cannot decrypt")
        length = int.from_bytes(data[:LENGTH_FIELD_BYTES], byteorder=LENGTH_BYTEORDER, signed=False)
        return cls(length, bytes(data[LENGTH_FIELD_BYTES:]))


def encrypt_bytes(data: bytes, key: RSAKey) -> Frame:
    """Encrypt a byte string block by block.

    Args:
        data: The cleartext.
        key: The public key (e, n).

    Returns:
        The frame holding the ciphertext.
    """
    destbits = key.block_bits
    srcbits = destbits - 1
    blocks = _ceil_div(len(data) * 8, srcbits)
    padded = bytes(data) + bytes(_ceil_div(blocks * srcbits, 8) - len(data))
    src = BitCursor(padded)
    dest = BitCursor.blank(_ceil_div(blocks * destbits, 8))
    logger.debug("Encrypting %d bytes as %d blocks of %d -> %d bits", len(data), blocks, srcbits, destbits)
    for _ in range(blocks):
        dest.write(destbits, key.c_rsa(src.read(srcbits)))
    return Frame(len(data), bytes(dest.buffer))


def decrypt_bytes(frame: Frame, key: RSAKey) -> bytes:
    """Decrypt a frame back into the original byte string.

    The stored length is checked against the payload size before any work is done. The last block may overshoot
    the original length, the output is truncated to exactly `original_length` bytes.

    Args:
        frame: The encrypted frame.
        key: The private key (d, n).

    Returns:
        The recovered cleartext.

    Raises:
        CorruptedFile: If the stored length does not fit the payload or a block is out of range for the key.
    """
    srcbits = key.block_bits
    dstbits = srcbits - 1
    origlen = frame.original_length
    lendiff = origlen - len(frame.payload)
    maxdiff = origlen // dstbits + 1 + PADDING_SLACK
    if not -maxdiff <= lendiff <= maxdiff:
        logger.debug("Length difference %d outside of +-%d", lendiff, maxdiff)
        raise CorruptedFile("File is corrupted, cannot decrypt")
    blocks = _ceil_div(origlen * 8, dstbits)
    if len(frame.payload) < _ceil_div(blocks * srcbits, 8):
        raise CorruptedFile("File is truncated, cannot decrypt")
    src = BitCursor(frame.payload)
    dest = BitCursor.blank(_ceil_div(blocks * dstbits, 8))
    logger.debug("Decrypting %d blocks of %d -> %d bits", blocks, srcbits, dstbits)
    for _ in range(blocks):
        block = src.read(srcbits)
        if block >= key.mod:
            raise CorruptedFile(f"Block {block} out of range for modulus {key.mod}, cannot decrypt")
        dest.write(dstbits, key.c_rsa(block))
    return bytes(dest.buffer[:origlen])


def read_file(file: pathlib.Path) -> bytes:
    """Read a whole file into memory."""
    with open(file, "rb") as f:
        return f.read()


def write_file(file: pathlib.Path, data: bytes) -> None:
    """Overwrite a file with `data`, truncating it first."""
    with open(file, "wb") as f:
        f.write(data)


def encrypt_file(file: pathlib.Path, key: RSAKey) -> Frame:
    """Encrypt a file in place.

    The file is rewritten directly, a failure half-way through leaves it truncated.

    Args:
        file: The file to encrypt.
        key: The public key (e, n).

    Returns:
        The frame that was written.
    """
    frame = encrypt_bytes(read_file(file), key)
    write_file(file, frame.to_bytes())
    return frame


def decrypt_file(file: pathlib.Path, key: RSAKey) -> bytes:
    """Decrypt a file in place.

    Args:
        file: The file to decrypt.
        key: The private key (d, n).

    Returns:
        The cleartext that was written.
    """
    clear = decrypt_bytes(Frame.from_bytes(read_file(file)), key)
    write_file(file, clear)
    return clear
