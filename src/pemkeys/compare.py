"""Decides whether two public keys hold the same cryptographic material."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import hmac
import typing

from pemkeys.curves import CurveParams
from pemkeys.errors import IncomparableKeyTypes
from pemkeys.errors import UnsupportedKeyType
from pemkeys.keys import ECPublicKey
from pemkeys.keys import Ed25519PublicKey
from pemkeys.keys import PUBLIC_KEY_TYPES
from pemkeys.keys import PublicKey
from pemkeys.keys import RSAPublicKey
from pemkeys.keys import type_name

_K = typing.TypeVar("_K", RSAPublicKey, ECPublicKey, Ed25519PublicKey)


def _counterpart(a: PublicKey, b: PublicKey, family: type[_K]) -> _K:
    if not isinstance(b, family):
        raise IncomparableKeyTypes(type_name(a), type_name(b))
    return b


def same_curve(a: CurveParams, b: CurveParams) -> bool:
    """Compares domain parameters, ignoring the curve's name and OID."""
    return (a.p == b.p and a.n == b.n and a.b == b.b and a.gx == b.gx and a.gy == b.gy
            and a.bit_size == b.bit_size)


def compare_public_keys(a: PublicKey, b: PublicKey) -> bool:
    """Reports whether two public keys are equal.

    Keys of different families are not unequal, they are incomparable, and raise accordingly.

    Args:
        a: The first key.
        b: The second key.

    Returns:
        True if both keys hold the same material.

    Raises:
        UnsupportedKeyType: If either argument is not a public key we model.
        IncomparableKeyTypes: If the keys belong to different families.
    """
    for key in (a, b):
        if not isinstance(key, PUBLIC_KEY_TYPES):
            raise UnsupportedKeyType(type_name(key))
    match a:
        case RSAPublicKey():
            other = _counterpart(a, b, RSAPublicKey)
            return a.modulus == other.modulus and a.exponent == other.exponent
        case ECPublicKey():
            other = _counterpart(a, b, ECPublicKey)
            return a.x == other.x and a.y == other.y and same_curve(a.curve, other.curve)
        case Ed25519PublicKey():
            other = _counterpart(a, b, Ed25519PublicKey)
            return hmac.compare_digest(a.raw, other.raw)
        case _:
            typing.assert_never(a)
