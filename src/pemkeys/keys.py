"""The key model: one immutable value type per supported key family.

Public keys form the closed union `PublicKey` (RSA, EC, Ed25519) and private keys the closed union `PrivateKey`
(the same families plus legacy DSA). DSA keys are never produced by our parsers; they exist so that callers holding
one can still ask for its size. Numeric fields are plain Python ints, which are arbitrary precision and immutable.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import dataclasses
import math
import typing

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from pemkeys.curves import CurveParams

ED25519_KEY_SIZE = 32


@dataclasses.dataclass(frozen=True)
class RSAPublicKey:
    """An RSA public key.

    Attributes:
        modulus: The modulus n.
        exponent: The public exponent e.
    """
    modulus: int
    exponent: int


@dataclasses.dataclass(frozen=True)
class ECPublicKey:
    """A public point on a named prime curve."""
    curve: CurveParams
    x: int
    y: int


@dataclasses.dataclass(frozen=True)
class Ed25519PublicKey:
    """An Ed25519 public key in its raw 32-byte encoding."""
    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != ED25519_KEY_SIZE:
            raise ValueError(f"Ed25519 public keys are {ED25519_KEY_SIZE} bytes, got {len(self.raw)}")


@dataclasses.dataclass(frozen=True)
class DSAPublicKey:
    """A legacy DSA public key, only ever sized."""
    p: int
    q: int
    g: int
    y: int


@dataclasses.dataclass(frozen=True)
class RSAPrivateKey:
    """An RSA private key.

    Attributes:
        modulus: The modulus n.
        public_exponent: The public exponent e.
        private_exponent: The private exponent d.
        primes: The prime factors of n, two for regular keys and more for multi-prime keys.
    """
    modulus: int
    public_exponent: int
    private_exponent: int = dataclasses.field(repr=False)
    primes: tuple[int, ...] = dataclasses.field(default=(), repr=False)

    def public_key(self) -> RSAPublicKey:
        return RSAPublicKey(self.modulus, self.public_exponent)

    def is_consistent(self) -> bool:
        """Checks that the primes, if any, multiply to the modulus."""
        if not self.primes:
            return True
        return all(p > 1 for p in self.primes) and math.prod(self.primes) == self.modulus


@dataclasses.dataclass(frozen=True)
class ECPrivateKey:
    """An EC private scalar together with the public point it generates."""
    curve: CurveParams
    scalar: int = dataclasses.field(repr=False)
    x: int
    y: int

    def public_key(self) -> ECPublicKey:
        return ECPublicKey(self.curve, self.x, self.y)


@dataclasses.dataclass(frozen=True)
class Ed25519PrivateKey:
    """An Ed25519 private key, held as its RFC 8032 32-byte seed."""
    seed: bytes = dataclasses.field(repr=False)

    def __post_init__(self) -> None:
        if len(self.seed) != ED25519_KEY_SIZE:
            raise ValueError(f"Ed25519 seeds are {ED25519_KEY_SIZE} bytes, got {len(self.seed)}")

    def public_key(self) -> Ed25519PublicKey:
        pub = ed25519.Ed25519PrivateKey.from_private_bytes(self.seed).public_key()
        return Ed25519PublicKey(pub.public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw))


@dataclasses.dataclass(frozen=True)
class DSAPrivateKey:
    """A legacy DSA private key, only ever sized."""
    p: int
    q: int
    g: int
    y: int
    x: int = dataclasses.field(repr=False)

    def public_key(self) -> DSAPublicKey:
        return DSAPublicKey(self.p, self.q, self.g, self.y)


PublicKey: typing.TypeAlias = RSAPublicKey | ECPublicKey | Ed25519PublicKey
PrivateKey: typing.TypeAlias = RSAPrivateKey | ECPrivateKey | Ed25519PrivateKey | DSAPrivateKey
AnyKey: typing.TypeAlias = PublicKey | PrivateKey | DSAPublicKey

PUBLIC_KEY_TYPES = (RSAPublicKey, ECPublicKey, Ed25519PublicKey)
PRIVATE_KEY_TYPES = (RSAPrivateKey, ECPrivateKey, Ed25519PrivateKey, DSAPrivateKey)
ANY_KEY_TYPES = (*PUBLIC_KEY_TYPES, *PRIVATE_KEY_TYPES, DSAPublicKey)


def type_name(obj: object) -> str:
    """The name used for a value in diagnostics."""
    return type(obj).__name__
