# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import dataclasses

from cryptography.hazmat.primitives import serialization
import pytest

import pemkeys
from pemkeys import curves
from pemkeys import keys


def test_rsa_private_to_public():
    key = pemkeys.RSAPrivateKey(3233, 17, 2753, (61, 53))
    assert key.public_key() == pemkeys.RSAPublicKey(3233, 17)
    assert key.is_consistent()
    assert not pemkeys.RSAPrivateKey(3233, 17, 2753, (61, 59)).is_consistent()
    assert pemkeys.RSAPrivateKey(3233, 17, 2753).is_consistent()


def test_private_material_hidden_from_repr():
    key = pemkeys.RSAPrivateKey(3233, 17, 2753, (61, 53))
    assert "2753" not in repr(key)
    eck = pemkeys.ECPrivateKey(curves.P256, 1, curves.P256.gx, curves.P256.gy)
    assert "scalar" not in repr(eck)


def test_ec_private_to_public():
    key = pemkeys.ECPrivateKey(curves.P256, 1, curves.P256.gx, curves.P256.gy)
    assert key.public_key() == pemkeys.ECPublicKey(curves.P256, curves.P256.gx, curves.P256.gy)


def test_ed25519_private_to_public(ed25519_key):
    seed = ed25519_key.private_bytes(serialization.Encoding.Raw, serialization.PrivateFormat.Raw,
                                     serialization.NoEncryption())
    raw = ed25519_key.public_key().public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)
    assert pemkeys.Ed25519PrivateKey(seed).public_key() == pemkeys.Ed25519PublicKey(raw)


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_ed25519_length_checked(length):
    with pytest.raises(ValueError):
        pemkeys.Ed25519PublicKey(bytes(length))
    with pytest.raises(ValueError):
        pemkeys.Ed25519PrivateKey(bytes(length))


def test_dsa_private_to_public():
    key = pemkeys.DSAPrivateKey(p=23, q=11, g=4, y=8, x=3)
    assert key.public_key() == pemkeys.DSAPublicKey(23, 11, 4, 8)


def test_keys_are_immutable():
    key = pemkeys.RSAPublicKey(3233, 17)
    with pytest.raises(dataclasses.FrozenInstanceError):
        key.modulus = 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        curves.P256.b = 0


def test_type_tuples_cover_unions():
    assert set(keys.PUBLIC_KEY_TYPES) == {pemkeys.RSAPublicKey, pemkeys.ECPublicKey, pemkeys.Ed25519PublicKey}
    assert pemkeys.DSAPublicKey not in keys.PUBLIC_KEY_TYPES
    assert pemkeys.DSAPrivateKey in keys.PRIVATE_KEY_TYPES
    assert keys.type_name(pemkeys.RSAPublicKey(3233, 17)) == "RSAPublicKey"
