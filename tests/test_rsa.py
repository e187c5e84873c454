# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64

from pyasn1.codec.der import decoder
from pyasn1_modules import rfc8017
import pytest

from rsacrypt import errors
import rsacrypt.rsa as rsau


def unpem(text: str, subtype: str) -> bytes:
    header, footer = rsau.PEM_TYPES[subtype]
    lines = text.splitlines()
    assert lines[0] == header
    assert lines[-1] == footer
    assert all(len(line) <= 64 for line in lines[1:-1])
    return base64.b64decode("".join(lines[1:-1]))


def test_c_rsa_vector():
    assert rsau.RSAPubKey(55, 3).c_rsa(2) == 8
    assert rsau.RSAPrivKey(55, 27).c_rsa(8) == 2


@pytest.mark.parametrize("message", [-1, 55, 56, 2**40])
def test_c_rsa_range(message):
    with pytest.raises(ValueError):
        rsau.RSAPubKey(55, 3).c_rsa(message)


@pytest.mark.parametrize("mod,expo", [(0, 3), (1, 3), (2**32, 3), (55, -1), (55, 2**32), (-55, 3)])
def test_key_validates(mod, expo):
    with pytest.raises(errors.InvalidArguments):
        rsau.RSAPubKey(mod, expo)


@pytest.mark.parametrize("mod,bits", [(2, 2), (3, 2), (55, 6), (64, 7), (2**32 - 1, 32)])
def test_block_bits(mod, bits):
    assert rsau.RSAPubKey(mod, 3).block_bits == bits


def test_generate():
    pk = rsau.RSAPrivKey.generate(5, 11)
    assert pk.mod == 55
    assert pk.expo == 27
    assert pk.pub == rsau.RSAPubKey(55, 3)
    assert (pk.p, pk.q) == (5, 11)
    assert pk.exp1 == 27 % 4
    assert pk.exp2 == 27 % 10
    assert (pk.coeff * pk.q) % pk.p == 1


def test_generate_propagates_overflow():
    with pytest.raises(errors.ModulusOverflow):
        rsau.RSAPrivKey.generate(65537, 65537)


def test_key_equality():
    assert rsau.RSAPubKey(55, 3) == rsau.RSAPubKey(55, 3)
    assert rsau.RSAPubKey(55, 3) != rsau.RSAPrivKey(55, 3)
    assert rsau.RSAPubKey(55, 3) != rsau.RSAPubKey(55, 7)
    assert repr(rsau.RSAPrivKey(55, 27)) == "RSAPrivKey(mod=55, expo=27)"


def test_public_pem():
    pem = rsau.RSAPubKey(1022117, 5).to_pem()
    keydata, rest = decoder.decode(unpem(pem, "PKCS1_PUB"), asn1Spec=rfc8017.RSAPublicKey())
    assert not rest
    assert int(keydata["modulus"]) == 1022117
    assert int(keydata["publicExponent"]) == 5


def test_private_pem():
    pk = rsau.RSAPrivKey.generate(1009, 1013)
    pem = pk.to_pem()
    keydata, rest = decoder.decode(unpem(pem, "PKCS1_PRIV"), asn1Spec=rfc8017.RSAPrivateKey())
    assert not rest
    assert int(keydata["version"]) == 0
    assert int(keydata["modulus"]) == 1009 * 1013
    assert int(keydata["publicExponent"]) == pk.pub.expo
    assert int(keydata["privateExponent"]) == pk.expo
    assert int(keydata["prime1"]) == 1009
    assert int(keydata["prime2"]) == 1013
    assert int(keydata["exponent1"]) == pk.expo % 1008
    assert int(keydata["exponent2"]) == pk.expo % 1012
    assert (int(keydata["coefficient"]) * 1013) % 1009 == 1


@pytest.mark.parametrize("key", [rsau.RSAPrivKey(55, 27), rsau.RSAPrivKey(55, 27, 3), rsau.RSAPrivKey(49, 5, 5, 7, 7)])
def test_private_pem_incomplete(key):
    with pytest.raises(errors.InvalidArguments):
        key.to_pem()


@pytest.mark.parametrize("size", [0, 1, 47, 48, 49, 200])
def test_pem_block_wraps(size):
    pem = rsau.pem_block("PKCS1_PUB", bytes(size))
    lines = pem.splitlines()
    assert lines[0] == rsau.PEM_TYPES["PKCS1_PUB"][0]
    assert lines[-1] == rsau.PEM_TYPES["PKCS1_PUB"][1]
    assert pem.endswith("\n")
    assert all(len(line) <= 64 for line in lines)
