"""Fixed-width integer arithmetic for the RSA primitive.

All key material lives in a single unsigned machine word of `WORD_BITS` bits. Products are formed in a double-width
accumulator and reduced back to the word, so the behavior matches an unsigned 32/64-bit implementation exactly.

Typical usage example:

    bitwidth(55)          # 6
    modexp(2, 3, 55)      # 8
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0

WORD_BITS: int = 32
WORD_MASK: int = (1 << WORD_BITS) - 1
WORD_MAX: int = WORD_MASK
DWORD_MASK: int = (1 << 2 * WORD_BITS) - 1


def to_word(value: int) -> int:
    """Truncate an integer to the unsigned machine word."""
    return value & WORD_MASK


def bitwidth(number: int) -> int:
    """Determine how many bits are needed to represent `number`.

    Scans from the highest bit of the word downward and stops at the first set bit.

    Args:
        number: Unsigned value in `[0, WORD_MAX]`.

    Returns:
        The number of significant bits, 0 for `number == 0`.

    Raises:
        ValueError: If `number` does not fit the unsigned machine word.
    """
    if not 0 <= number <= WORD_MAX:
        raise ValueError(f"{number} does not fit an unsigned {WORD_BITS}-bit word")
    i = WORD_BITS - 1
    while i >= 0:
        if number >> i:
            return i + 1
        i -= 1
    return 0


def modexp(a: int, b: int, n: int) -> int:
    """Compute `a**b mod n` by left-to-right square-and-multiply.

    Every exponent bit from `WORD_BITS - 1` down to 0 is visited. Operands are truncated to the word, intermediate
    products are kept in a double-width accumulator. Callers are trusted to keep `a` below `n`; nothing is guarded
    beyond the truncation.

    Args:
        a: The base.
        b: The exponent.
        n: The modulus, must be > 0.

    Returns:
        The result in `[0, n)`.
    """
    a, b, n = to_word(a), to_word(b), to_word(n)
    acc = 1 % n
    for i in range(WORD_BITS - 1, -1, -1):
        acc = ((acc * acc) & DWORD_MASK) % n
        if b & (1 << i):
            acc = ((acc * a) & DWORD_MASK) % n
    return to_word(acc)
