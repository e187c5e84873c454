"""Key generation utility for word-sized RSA keys.

Provides the slow but obvious trial-division primality test, a linear scan for the next prime and the derivation of
an RSA key pair from two supplied primes. The public exponent is always the smallest candidate that has an inverse
modulo the totient; this is weak on purpose and kept that way.

Typical usage example:

    find_next_prime(1000)
    e, d, n = generate_keys(5, 11)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math
import typing

from rsacrypt.arith import bitwidth
from rsacrypt.arith import WORD_BITS
from rsacrypt.arith import WORD_MAX
from rsacrypt.errors import ModulusOverflow
from rsacrypt.errors import NoInverseFound
from rsacrypt.errors import PrimeSearchExhausted

logger = logging.getLogger(__name__)


def is_prime(candidate: int) -> bool:
    """Determine if the given number is a prime.

    Tries dividing the number with all integers from 2 up to its integer square root. 0 and 1 are not primes.

    Args:
        candidate: The non-negative integer to test.

    Returns:
        True if `candidate` is prime, False otherwise.
    """
    if candidate < 2:
        return False
    for i in range(2, math.isqrt(candidate) + 1):
        if candidate % i == 0:
            return False
    return True


def find_next_prime(start: int, prntr: typing.Callable = print) -> int:
    """Find the first prime at or after `start`, testing odd numbers only.

    An even `start` is forced odd first, so the scan begins at the next odd value. Each candidate produces a
    progress line through `prntr`.

    Args:
        start: The number from which to start testing.
        prntr: Callable receiving the progress lines. Defaults to print.

    Returns:
        The prime found.

    Raises:
        PrimeSearchExhausted: If the search reaches the end of the machine word without a prime.
    """
    candidate = start | 1
    while candidate < WORD_MAX:
        if is_prime(candidate):
            prntr(f"Testing {candidate}... is a prime")
            return candidate
        prntr(f"Testing {candidate}... not prime")
        candidate += 2
    raise PrimeSearchExhausted("Could not find a prime")


def check_gcd(d: int, f: int) -> int | None:
    """Check that gcd(d, f) is 1 and, if so, find the multiplicative inverse of `d` modulo `f`.

    Runs the coefficient-triple recurrence of the extended Euclidean algorithm, keeping the invariant
    `x1*f + x2*d == x3` (and likewise for `y`). The walk stops as soon as the remainder reaches 1, at which point
    `y2` is the inverse. Coefficients go negative along the way, the result is normalized into `[0, f)`.

    Args:
        d: The integer to invert.
        f: The modulus of the inverse.

    Returns:
        The inverse of `d` modulo `f`, or None if the two share a divisor other than 1.
    """
    x1, x2, x3 = 1, 0, f
    y1, y2, y3 = 0, 1, d
    while y3 != 0:
        if y3 == 1:
            return y2 + f if y2 < 0 else y2
        q = x3 // y3
        (x1, x2, x3), (y1, y2, y3) = (y1, y2, y3), (x1 - q * y1, x2 - q * y2, x3 - q * y3)
    # gcd is in x3, but there is no inverse
    return None


def generate_keys(p: int, q: int) -> tuple[int, int, int]:
    """Generates an RSA key pair from the two primes.

    Primality of `p` and `q` is not checked here.

    Args:
        p: The first prime.
        q: The second prime.

    Returns:
        The tuple (e, d, n): public exponent, private exponent and modulus.

    Raises:
        ModulusOverflow: If `p*q` does not fit the machine word.
        NoInverseFound: If no exponent below the totient has an inverse.
    """
    if p > WORD_MAX or q > WORD_MAX or bitwidth(p) + bitwidth(q) > WORD_BITS:
        raise ModulusOverflow("The multiplication of p and q yields an integer too big. Try again with smaller values.")
    n = p * q
    f = (p - 1) * (q - 1)
    logger.debug("Searching public exponent for n=%d, f=%d", n, f)
    for e in range(2, f):
        d = check_gcd(e, f)
        if d is not None:
            logger.debug("Found e=%d after %d candidates", e, e - 1)
            return e, d, n
    raise NoInverseFound("Cannot calculate multiplicative inverse integer.")
