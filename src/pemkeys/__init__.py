"""Certificate and Key Utilities for PEM Input.

Decodes PEM-armored RSA and EC private keys, X.509 certificates and public keys into plain value types, compares
public keys across encodings, and reports key strength in bits. Decoding is done with pyasn1; no I/O happens here.

Typical usage example:

    pub = parse_public_key(cert_pem)
    priv = parse_rsa_private_key(key_pem)
    if compare_public_keys(pub, priv.public_key()):
        print(key_size_bits(priv))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from pemkeys.certificate import Certificate
from pemkeys.compare import compare_public_keys
from pemkeys.curves import CurveParams
from pemkeys.errors import IncomparableKeyTypes
from pemkeys.errors import MalformedCertificate
from pemkeys.errors import MalformedInput
from pemkeys.errors import MalformedPrivateKey
from pemkeys.errors import PemKeysError
from pemkeys.errors import UnsupportedCurve
from pemkeys.errors import UnsupportedKeyType
from pemkeys.keys import DSAPrivateKey
from pemkeys.keys import DSAPublicKey
from pemkeys.keys import ECPrivateKey
from pemkeys.keys import ECPublicKey
from pemkeys.keys import Ed25519PrivateKey
from pemkeys.keys import Ed25519PublicKey
from pemkeys.keys import PrivateKey
from pemkeys.keys import PublicKey
from pemkeys.keys import RSAPrivateKey
from pemkeys.keys import RSAPublicKey
from pemkeys.parse import parse_certificate
from pemkeys.parse import parse_ec_private_key
from pemkeys.parse import parse_public_key
from pemkeys.parse import parse_rsa_private_key
from pemkeys.parse import public_key_to_pem
from pemkeys.pem import decode_pem
from pemkeys.pem import encode_pem
from pemkeys.pem import PemBlock
from pemkeys.size import key_size_bits

__version__ = "0.1.0"
__all__ = [
    "Certificate",
    "CurveParams",
    "DSAPrivateKey",
    "DSAPublicKey",
    "ECPrivateKey",
    "ECPublicKey",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "PemBlock",
    "PrivateKey",
    "PublicKey",
    "RSAPrivateKey",
    "RSAPublicKey",
    "PemKeysError",
    "MalformedInput",
    "MalformedPrivateKey",
    "MalformedCertificate",
    "UnsupportedCurve",
    "UnsupportedKeyType",
    "IncomparableKeyTypes",
    "decode_pem",
    "encode_pem",
    "parse_rsa_private_key",
    "parse_ec_private_key",
    "parse_certificate",
    "parse_public_key",
    "public_key_to_pem",
    "compare_public_keys",
    "key_size_bits",
]
