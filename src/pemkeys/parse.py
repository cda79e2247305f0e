"""Parses PEM-armored keys and certificates into the key model.

Every parser strips the PEM armor, decodes the DER payload with pyasn1 and converts the result into one of our
immutable value types. PEM labels are not checked against what is being asked for; a mismatched label simply shows
up as a decode failure.

Typical usage example:

    pub = parse_public_key(open("server.crt").read())
    priv = parse_rsa_private_key(open("server.key").read())
    same = compare_public_keys(pub, priv.public_key())
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import warnings

from pyasn1.type import univ
from pyasn1_modules import rfc5208
from pyasn1_modules import rfc5280
from pyasn1_modules import rfc5480
from pyasn1_modules import rfc5915
from pyasn1_modules import rfc8017

from pemkeys import curves
from pemkeys import pem
from pemkeys.certificate import Certificate
from pemkeys.errors import MalformedPrivateKey
from pemkeys.errors import UnsupportedCurve
from pemkeys.keys import ECPrivateKey
from pemkeys.keys import PublicKey
from pemkeys.keys import RSAPrivateKey
from pemkeys.spki import curve_from_parameters
from pemkeys.spki import DECODE_ERRORS
from pemkeys.spki import decode_der
from pemkeys.spki import public_key_from_spki
from pemkeys.spki import public_key_to_der

MIN_RSA_BITS = 1024


def _unwrap_pkcs8(payload: bytes, algorithm: univ.ObjectIdentifier) -> tuple[bytes, univ.Any] | None:
    """Opens a PKCS #8 PrivateKeyInfo wrapper, if the payload is one.

    Args:
        payload: The DER payload.
        algorithm: The private key algorithm the wrapper must announce.

    Returns:
        The inner private key DER and the algorithm parameters, or None if the payload is not PKCS #8.

    Raises:
        ValueError: If the wrapper is for a different algorithm or an unknown version.
    """
    try:
        decdata = decode_der(payload, rfc5208.PrivateKeyInfo())
    except DECODE_ERRORS:
        return None
    if decdata["version"] != 0:
        raise ValueError("Unsupported version of private key information wrapper")
    if decdata["privateKeyAlgorithm"]["algorithm"] != algorithm:
        raise ValueError(f"PKCS #8 key algorithm {decdata['privateKeyAlgorithm']['algorithm']} is not {algorithm}")
    return decdata["privateKey"].asOctets(), decdata["privateKeyAlgorithm"]["parameters"]


def _rsa_private_key_from_der(payload: bytes) -> RSAPrivateKey:
    wrapped = _unwrap_pkcs8(payload, rfc8017.rsaEncryption)
    if wrapped is not None:
        payload, _ = wrapped
    keydata = decode_der(payload, rfc8017.RSAPrivateKey())
    version = int(keydata["version"])
    others = keydata["otherPrimeInfos"]
    primes = (int(keydata["prime1"]), int(keydata["prime2"]))
    if version == 0 and others.isValue and len(others):
        raise ValueError("two-prime RSA key carries additional primes")
    if version == 1:
        if not others.isValue or not len(others):
            raise ValueError("multi-prime RSA key lacks additional primes")
        primes += tuple(int(info["prime"]) for info in others)
    elif version != 0:
        raise ValueError(f"unsupported RSA private key version {version}")
    key = RSAPrivateKey(int(keydata["modulus"]), int(keydata["publicExponent"]), int(keydata["privateExponent"]),
                        primes)
    if key.modulus <= 0 or key.public_exponent <= 0:
        raise ValueError("RSA modulus and exponent must be positive")
    if not key.is_consistent():
        raise ValueError("RSA primes do not multiply to the modulus")
    return key


def _ec_private_key_from_der(payload: bytes) -> ECPrivateKey:
    curve = None
    wrapped = _unwrap_pkcs8(payload, rfc5480.id_ecPublicKey)
    if wrapped is not None:
        payload, params = wrapped
        curve = curve_from_parameters(params)
    keydata = decode_der(payload, rfc5915.ECPrivateKey())
    if int(keydata["version"]) != 1:
        raise ValueError(f"unknown EC private key version {int(keydata['version'])}")
    params = keydata["parameters"]
    if params.isValue:
        if params.getName() != "namedCurve":
            raise UnsupportedCurve("explicit domain parameters")
        named = curves.curve_for_oid(str(params["namedCurve"]))
        if curve is not None and named != curve:
            raise ValueError(f"PKCS #8 wrapper names {curve.name} but key names {named.name}")
        curve = named
    if curve is None:
        raise ValueError("EC private key does not name its curve")
    raw = keydata["privateKey"].asOctets()
    if len(raw.lstrip(b"\x00")) > curve.byte_size:
        raise ValueError(f"private key too long for {curve.name}")
    scalar = int.from_bytes(raw, "big")
    x, y = curves.derive_point(curve, scalar)
    return ECPrivateKey(curve, scalar, x, y)


def parse_rsa_private_key(text: str | bytes) -> RSAPrivateKey:
    """Parses an RSA private key from a PEM block.

    Reads PKCS #1 `RSAPrivateKey` payloads, and PKCS #8 payloads wrapping one.

    Args:
        text: The PEM text.

    Returns:
        The RSA private key.

    Raises:
        MalformedInput: If there is no PEM block.
        MalformedPrivateKey: If the payload is not a valid RSA private key.
    """
    block = pem.require_pem(text)
    try:
        key = _rsa_private_key_from_der(block.payload)
    except DECODE_ERRORS as err:
        raise MalformedPrivateKey(f"malformed RSA private key: {err}") from err
    if key.modulus.bit_length() < MIN_RSA_BITS:
        warnings.warn(f"RSA key of {key.modulus.bit_length()} bits is insecure! Please use with care.",
                      RuntimeWarning)
    return key


def parse_ec_private_key(text: str | bytes) -> ECPrivateKey:
    """Parses an EC private key from a PEM block.

    Reads SEC 1 / RFC 5915 `ECPrivateKey` payloads, and PKCS #8 payloads wrapping one. The public point is always
    recomputed from the private scalar.

    Args:
        text: The PEM text.

    Returns:
        The EC private key.

    Raises:
        MalformedInput: If there is no PEM block.
        MalformedPrivateKey: If the payload is not a valid EC private key.
        UnsupportedCurve: If the key names a curve we do not know.
    """
    block = pem.require_pem(text)
    try:
        return _ec_private_key_from_der(block.payload)
    except DECODE_ERRORS as err:
        raise MalformedPrivateKey(f"malformed EC private key: {err}") from err


def parse_certificate(text: str | bytes) -> Certificate:
    """Parses an X.509 certificate from a PEM block.

    Raises:
        MalformedInput: If there is no PEM block.
        MalformedCertificate: If the payload is not a valid certificate.
        UnsupportedCurve: If the certificate holds an EC key on a curve we do not know.
    """
    block = pem.require_pem(text)
    return Certificate.from_der(block.payload)


def parse_public_key(text: str | bytes) -> PublicKey:
    """Parses a public key from a PEM block holding either a bare key or a certificate.

    The payload is first read as a SubjectPublicKeyInfo. If that fails, it is read as a certificate and the
    certificate's key is returned instead; should that fail too, the certificate error is raised.

    Args:
        text: The PEM text.

    Returns:
        An RSA, EC or Ed25519 public key.

    Raises:
        MalformedInput: If there is no PEM block.
        MalformedCertificate: If the payload is neither a public key nor a certificate.
        UnsupportedKeyType: If the key is of a family other than RSA, EC or Ed25519.
        UnsupportedCurve: If an EC key sits on a curve we do not know.
    """
    block = pem.require_pem(text)
    try:
        keyinfo = decode_der(block.payload, rfc5280.SubjectPublicKeyInfo())
        return public_key_from_spki(keyinfo)
    except DECODE_ERRORS:
        certificate = Certificate.from_der(block.payload)
    return certificate.public_key()


def public_key_to_pem(key: PublicKey) -> str:
    """Encodes a public key as a `PUBLIC KEY` PEM block."""
    return pem.encode_pem("PUBLIC KEY", public_key_to_der(key))
