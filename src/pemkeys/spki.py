"""Translates between DER SubjectPublicKeyInfo structures and the key model.

This is the single place where algorithm identifiers are inspected to decide which key family a structure belongs
to. Decoding is done by pyasn1 against the RFC 5280 schemas; our job is to pick the right inner schema and check the
key material makes sense.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from pyasn1 import error
from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.codec.native import encoder as localize
from pyasn1.type import univ
from pyasn1_modules import rfc3279
from pyasn1_modules import rfc4055
from pyasn1_modules import rfc5280
from pyasn1_modules import rfc5480
from pyasn1_modules import rfc8017
from pyasn1_modules import rfc8410

from pemkeys import curves
from pemkeys.errors import UnsupportedCurve
from pemkeys.errors import UnsupportedKeyType
from pemkeys.keys import ECPublicKey
from pemkeys.keys import Ed25519PublicKey
from pemkeys.keys import PublicKey
from pemkeys.keys import RSAPublicKey

# Errors the DER primitives raise on bad input.
DECODE_ERRORS = (error.PyAsn1Error, ValueError)

# Algorithms we recognize but deliberately do not handle.
UNSUPPORTED_ALGORITHMS = {
    rfc3279.id_dsa: "DSAPublicKey",
    rfc3279.dhpublicnumber: "DHPublicKey",
    rfc4055.id_RSASSA_PSS: "RSASSAPSSPublicKey",
    rfc8410.id_Ed448: "Ed448PublicKey",
    rfc8410.id_X25519: "X25519PublicKey",
    rfc8410.id_X448: "X448PublicKey",
}


def decode_der(data: bytes, schema):
    """Decodes a DER structure, refusing trailing bytes.

    Args:
        data: The DER encoding.
        schema: The pyasn1 schema instance to decode against.

    Returns:
        The decoded pyasn1 object.

    Raises:
        PyAsn1Error: If the data does not match the schema.
        ValueError: If bytes remain after the structure.
    """
    decoded, rest = decoder.decode(data, asn1Spec=schema)
    if rest:
        raise ValueError(f"{len(rest)} bytes of trailing data after {type(schema).__name__}")
    return decoded


def curve_from_parameters(params: univ.Any) -> curves.CurveParams:
    """Resolves `id-ecPublicKey` algorithm parameters to a named curve.

    Raises:
        PyAsn1Error, ValueError: If the parameters are absent or undecodable.
        UnsupportedCurve: If they hold explicit domain parameters, an implicit curve or an unknown OID.
    """
    if not params.isValue:
        raise ValueError("missing elliptic curve parameters")
    choice = decode_der(params.asOctets(), rfc3279.EcpkParameters())
    match choice.getName():
        case "namedCurve":
            return curves.curve_for_oid(str(choice["namedCurve"]))
        case "implicitlyCA":
            raise UnsupportedCurve("implicitly inherited curve")
        case _:
            raise UnsupportedCurve("explicit domain parameters")


def public_key_from_spki(spki: rfc5280.SubjectPublicKeyInfo) -> PublicKey:
    """Classifies a decoded SubjectPublicKeyInfo and builds the matching public key.

    Args:
        spki: The decoded structure.

    Returns:
        An RSA, EC or Ed25519 public key.

    Raises:
        PyAsn1Error, ValueError: If the key material is malformed.
        UnsupportedKeyType: If the algorithm is anything other than RSA, EC or Ed25519.
        UnsupportedCurve: If an EC key sits on a curve we do not know.
    """
    algorithm = spki["algorithm"]["algorithm"]
    material = spki["subjectPublicKey"].asOctets()
    if algorithm == rfc8017.rsaEncryption:
        keydata = decode_der(material, rfc8017.RSAPublicKey())
        pykeyd = localize.encode(keydata)
        if pykeyd["modulus"] <= 0:
            raise ValueError("RSA modulus is not a positive number")
        if pykeyd["publicExponent"] <= 0:
            raise ValueError("RSA public exponent is not a positive number")
        return RSAPublicKey(pykeyd["modulus"], pykeyd["publicExponent"])
    if algorithm == rfc5480.id_ecPublicKey:
        curve = curve_from_parameters(spki["algorithm"]["parameters"])
        x, y = curves.decode_point(curve, material)
        return ECPublicKey(curve, x, y)
    if algorithm == rfc8410.id_Ed25519:
        if spki["algorithm"]["parameters"].isValue:
            raise ValueError("Ed25519 keys must not carry algorithm parameters")
        return Ed25519PublicKey(material)
    raise UnsupportedKeyType(UNSUPPORTED_ALGORITHMS.get(algorithm, f"unknown algorithm {algorithm}"))


def public_key_to_spki(key: PublicKey) -> rfc5280.SubjectPublicKeyInfo:
    """Builds the SubjectPublicKeyInfo for a public key."""
    pkalgo = rfc5280.AlgorithmIdentifier()
    match key:
        case RSAPublicKey():
            keydata = rfc8017.RSAPublicKey()
            keydata["modulus"] = key.modulus
            keydata["publicExponent"] = key.exponent
            pkalgo["algorithm"] = rfc8017.rsaEncryption
            pkalgo["parameters"] = univ.Null("")
            material = encoder.encode(keydata)
        case ECPublicKey():
            pkalgo["algorithm"] = rfc5480.id_ecPublicKey
            pkalgo["parameters"] = univ.ObjectIdentifier(key.curve.oid)
            material = curves.encode_point(key.curve, key.x, key.y)
        case Ed25519PublicKey():
            pkalgo["algorithm"] = rfc8410.id_Ed25519
            material = key.raw
        case _:
            raise UnsupportedKeyType(type(key).__name__)
    spki = rfc5280.SubjectPublicKeyInfo()
    spki["algorithm"] = pkalgo
    spki["subjectPublicKey"] = univ.BitString.fromOctetString(material)
    return spki


def public_key_to_der(key: PublicKey) -> bytes:
    """DER-encodes a public key as a SubjectPublicKeyInfo."""
    return encoder.encode(public_key_to_spki(key))
