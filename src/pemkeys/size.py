"""Reports the nominal strength of a key in bits."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from pemkeys.keys import ANY_KEY_TYPES
from pemkeys.keys import DSAPrivateKey
from pemkeys.keys import DSAPublicKey
from pemkeys.keys import ECPrivateKey
from pemkeys.keys import ECPublicKey
from pemkeys.keys import Ed25519PrivateKey
from pemkeys.keys import Ed25519PublicKey
from pemkeys.keys import RSAPrivateKey
from pemkeys.keys import RSAPublicKey


def key_size_bits(key: object) -> int | None:
    """Returns the size of a public or private key in bits.

    RSA keys are sized by their modulus rounded up to whole bytes, EC keys by their curve, Ed25519 keys by their raw
    encoding and DSA keys by their public value. Sizing is advisory, so anything unrecognized yields None rather
    than an error.

    Args:
        key: Any key, or anything else.

    Returns:
        The size in bits, or None if the key type is unsupported.
    """
    if not isinstance(key, ANY_KEY_TYPES):
        return None
    match key:
        case RSAPublicKey(modulus=mod) | RSAPrivateKey(modulus=mod):
            return (mod.bit_length() + 7) // 8 * 8
        case ECPublicKey(curve=curve) | ECPrivateKey(curve=curve):
            return curve.bit_size
        case Ed25519PublicKey(raw=raw) | Ed25519PrivateKey(seed=raw):
            return len(raw) * 8
        case DSAPublicKey(y=y) | DSAPrivateKey(y=y):
            return y.bit_length()
        case _:
            typing.assert_never(key)
