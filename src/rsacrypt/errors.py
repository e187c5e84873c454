"""Exceptions raised by rsacrypt.

Every failure in the package is fatal to the operation that raised it. Library functions raise, the command line
front end reports the message and exits.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSACryptError(Exception):
    """Base class for all rsacrypt failures."""


class InvalidArguments(RSACryptError, ValueError):
    """Arguments have the wrong count, shape or do not fit the machine word."""


class ModulusOverflow(RSACryptError, ValueError):
    """The product of the supplied primes does not fit into the machine word."""


class NoInverseFound(RSACryptError, ArithmeticError):
    """No public exponent with a multiplicative inverse exists below the totient."""


class CorruptedFile(RSACryptError, ValueError):
    """The stored frame does not match its payload and cannot be decrypted."""


class PrimeSearchExhausted(RSACryptError, RuntimeError):
    """The prime search reached the end of the machine word without a result."""
