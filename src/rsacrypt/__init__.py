"""Word-sized RSA in an Academic Sense.

Provides key generation from two small primes, a naive prime search and in-place file encryption/decryption, all
within a single 32-bit machine word. Great for seeing RSA work end to end, useless for keeping secrets.

Typical usage example:

    p = find_next_prime(1000)
    q = find_next_prime(p + 1)
    pk = RSAPrivKey.generate(p, q)
    encrypt_file("notes.txt", pk.pub)
    decrypt_file("notes.txt", pk)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsacrypt.arith import bitwidth
from rsacrypt.arith import modexp
from rsacrypt.bitstream import BitCursor
from rsacrypt.errors import CorruptedFile
from rsacrypt.errors import InvalidArguments
from rsacrypt.errors import ModulusOverflow
from rsacrypt.errors import NoInverseFound
from rsacrypt.errors import PrimeSearchExhausted
from rsacrypt.errors import RSACryptError
from rsacrypt.keygen import find_next_prime
from rsacrypt.keygen import generate_keys
from rsacrypt.keygen import is_prime
from rsacrypt.rsa import RSAPrivKey
from rsacrypt.rsa import RSAPubKey
from rsacrypt.transcode import decrypt_bytes
from rsacrypt.transcode import decrypt_file
from rsacrypt.transcode import encrypt_bytes
from rsacrypt.transcode import encrypt_file
from rsacrypt.transcode import Frame

__version__ = "0.0.1"
__all__ = [
    "BitCursor",
    "CorruptedFile",
    "Frame",
    "InvalidArguments",
    "ModulusOverflow",
    "NoInverseFound",
    "PrimeSearchExhausted",
    "RSACryptError",
    "RSAPrivKey",
    "RSAPubKey",
    "bitwidth",
    "decrypt_bytes",
    "decrypt_file",
    "encrypt_bytes",
    "encrypt_file",
    "find_next_prime",
    "generate_keys",
    "is_prime",
    "modexp",
]
