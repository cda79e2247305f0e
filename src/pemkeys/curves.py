"""Named elliptic curve domain parameters and SEC1 point handling.

Holds the short-Weierstrass (a = -3) NIST prime curves we can reason about, keyed by their OIDs as they appear in
`id-ecPublicKey` parameters and in RFC 5915 private keys. Scalar multiplication itself is left to `cryptography`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import dataclasses

from cryptography.hazmat.primitives.asymmetric import ec

from pemkeys.errors import UnsupportedCurve


@dataclasses.dataclass(frozen=True)
class CurveParams:
    """Domain parameters of a prime curve y^2 = x^3 - 3x + b over GF(p).

    Attributes:
        name: The NIST name, e.g. `P-256`.
        oid: Dotted OID of the named curve.
        p: Field prime.
        n: Order of the base point.
        b: Curve coefficient.
        gx: Base point x coordinate.
        gy: Base point y coordinate.
        bit_size: Declared size of the field in bits.
    """
    name: str
    oid: str
    p: int
    n: int
    b: int
    gx: int
    gy: int
    bit_size: int

    @property
    def byte_size(self) -> int:
        return (self.bit_size + 7) // 8

    def contains(self, x: int, y: int) -> bool:
        """Reports whether (x, y) is a point on the curve."""
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        return (y * y - (x * x * x - 3 * x + self.b)) % self.p == 0


P224 = CurveParams(
    name="P-224",
    oid="1.3.132.0.33",
    p=0xffffffffffffffffffffffffffffffff000000000000000000000001,
    n=0xffffffffffffffffffffffffffff16a2e0b8f03e13dd29455c5c2a3d,
    b=0xb4050a850c04b3abf54132565044b0b7d7bfd8ba270b39432355ffb4,
    gx=0xb70e0cbd6bb4bf7f321390b94a03c1d356c21122343280d6115c1d21,
    gy=0xbd376388b5f723fb4c22dfe6cd4375a05a07476444d5819985007e34,
    bit_size=224,
)

P256 = CurveParams(
    name="P-256",
    oid="1.2.840.10045.3.1.7",
    p=0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,
    n=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
    b=0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b,
    gx=0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296,
    gy=0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5,
    bit_size=256,
)

P384 = CurveParams(
    name="P-384",
    oid="1.3.132.0.34",
    p=int("fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe"
          "ffffffff0000000000000000ffffffff", 16),
    n=int("ffffffffffffffffffffffffffffffffffffffffffffffffc7634d81f4372ddf"
          "581a0db248b0a77aecec196accc52973", 16),
    b=int("b3312fa7e23ee7e4988e056be3f82d19181d9c6efe8141120314088f5013875a"
          "c656398d8a2ed19d2a85c8edd3ec2aef", 16),
    gx=int("aa87ca22be8b05378eb1c71ef320ad746e1d3b628ba79b9859f741e082542a38"
           "5502f25dbf55296c3a545e3872760ab7", 16),
    gy=int("3617de4a96262c6f5d9e98bf9292dc29f8f41dbd289a147ce9da3113b5f0b8c0"
           "0a60b1ce1d7e819d7a431d7c90ea0e5f", 16),
    bit_size=384,
)

P521 = CurveParams(
    name="P-521",
    oid="1.3.132.0.35",
    p=2**521 - 1,
    n=int("01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"
          "fa51868783bf2f966b7fcc0148f709a5d03bb5c9b8899c47aebb6fb71e91386409", 16),
    b=int("0051953eb9618e1c9a1f929a21a0b68540eea2da725b99b315f3b8b489918ef1"
          "09e156193951ec7e937b1652c0bd3bb1bf073573df883d2c34f1ef451fd46b503f00", 16),
    gx=int("00c6858e06b70404e9cd9e3ecb662395b4429c648139053fb521f828af606b4d"
           "3dbaa14b5e77efe75928fe1dc127a2ffa8de3348b3c1856a429bf97e7e31c2e5bd66", 16),
    gy=int("011839296a789a3bc0045c8a5fb42c7d1bd998f54449579b446817afbd17273e"
           "662c97ee72995ef42640c550b9013fad0761353c7086a272c24088be94769fd16650", 16),
    bit_size=521,
)

CURVES_BY_OID: dict[str, CurveParams] = {c.oid: c for c in (P224, P256, P384, P521)}
CURVES_BY_NAME: dict[str, CurveParams] = {c.name: c for c in CURVES_BY_OID.values()}

# Backends for scalar base multiplication, keyed by curve name.
_BACKEND_CURVES: dict[str, type[ec.EllipticCurve]] = {
    "P-224": ec.SECP224R1,
    "P-256": ec.SECP256R1,
    "P-384": ec.SECP384R1,
    "P-521": ec.SECP521R1,
}


def curve_for_oid(oid: str) -> CurveParams:
    """Looks a named curve up by dotted OID.

    Raises:
        UnsupportedCurve: If the OID is not one of ours.
    """
    try:
        return CURVES_BY_OID[str(oid)]
    except KeyError:
        raise UnsupportedCurve(str(oid)) from None


def curve_for_name(name: str) -> CurveParams:
    """Looks a named curve up by its NIST name (`P-256`) or SEC name (`secp256r1`)."""
    for curve in CURVES_BY_OID.values():
        if name in (curve.name, _BACKEND_CURVES[curve.name].name):
            return curve
    raise UnsupportedCurve(name)


def decode_point(curve: CurveParams, data: bytes) -> tuple[int, int]:
    """Decodes a SEC1 uncompressed point.

    Args:
        curve: The curve the point claims to be on.
        data: `0x04 || X || Y`, both coordinates padded to the curve byte size.

    Returns:
        The affine coordinates.

    Raises:
        ValueError: If the encoding is not uncompressed, has the wrong length or is off the curve.
    """
    size = curve.byte_size
    if len(data) != 1 + 2 * size or data[0] != 0x04:
        raise ValueError(f"invalid uncompressed point encoding for {curve.name}")
    x = int.from_bytes(data[1:1 + size], "big")
    y = int.from_bytes(data[1 + size:], "big")
    if not curve.contains(x, y):
        raise ValueError(f"point is not on curve {curve.name}")
    return x, y


def encode_point(curve: CurveParams, x: int, y: int) -> bytes:
    """Encodes an affine point in SEC1 uncompressed form."""
    size = curve.byte_size
    return b"\x04" + x.to_bytes(size, "big") + y.to_bytes(size, "big")


def derive_point(curve: CurveParams, scalar: int) -> tuple[int, int]:
    """Computes scalar * G on the given curve.

    Raises:
        ValueError: If the scalar is not in [1, n-1].
    """
    if not 0 < scalar < curve.n:
        raise ValueError(f"private scalar out of range for {curve.name}")
    numbers = ec.derive_private_key(scalar, _BACKEND_CURVES[curve.name]()).public_key().public_numbers()
    return numbers.x, numbers.y
