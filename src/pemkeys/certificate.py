"""A thin, opaque view over decoded X.509 certificates.

We do not interpret extensions, validity periods or signatures; a certificate is only ever a carrier for the public
key it embeds.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import dataclasses

from pyasn1.codec.der import encoder
from pyasn1_modules import rfc5280
from pyasn1_modules import rfc5480
from pyasn1_modules import rfc8017
from pyasn1_modules import rfc8410

from pemkeys import spki as spkiutil
from pemkeys.errors import MalformedCertificate
from pemkeys.keys import PublicKey

# Key algorithms whose material is checked while the certificate is decoded.
SUPPORTED_ALGORITHMS = (rfc8017.rsaEncryption, rfc5480.id_ecPublicKey, rfc8410.id_Ed25519)


@dataclasses.dataclass(frozen=True)
class Certificate:
    """A structurally valid X.509 certificate.

    Attributes:
        der: The full DER encoding.
        version: The X.509 version (1 to 3).
        serial_number: The issuer-assigned serial number.
        signature_algorithm: Dotted OID of the signature algorithm.
        public_key_algorithm: Dotted OID of the subject public key algorithm.
        public_key_info: DER encoding of the subject's SubjectPublicKeyInfo.
    """
    der: bytes = dataclasses.field(repr=False)
    version: int
    serial_number: int
    signature_algorithm: str
    public_key_algorithm: str
    public_key_info: bytes = dataclasses.field(repr=False)

    def public_key(self) -> PublicKey:
        """Extracts the embedded public key.

        Raises:
            MalformedCertificate: If the embedded key material is malformed.
            UnsupportedKeyType: If the key family is not RSA, EC or Ed25519.
            UnsupportedCurve: If an EC key sits on an unknown curve.
        """
        try:
            keyinfo = spkiutil.decode_der(self.public_key_info, rfc5280.SubjectPublicKeyInfo())
            return spkiutil.public_key_from_spki(keyinfo)
        except spkiutil.DECODE_ERRORS as err:
            raise MalformedCertificate(f"invalid subject public key: {err}") from err

    @classmethod
    def from_der(cls, der: bytes) -> "Certificate":
        """Decodes a DER certificate.

        Args:
            der: The DER encoding.

        Returns:
            The decoded certificate.

        Raises:
            MalformedCertificate: On any structural problem, including malformed RSA, EC or Ed25519 key material.
            UnsupportedCurve: If an EC key sits on an unknown curve.
        """
        try:
            cert = spkiutil.decode_der(der, rfc5280.Certificate())
        except spkiutil.DECODE_ERRORS as err:
            raise MalformedCertificate(f"malformed certificate: {err}") from err
        tbs = cert["tbsCertificate"]
        if encoder.encode(tbs["signature"]) != encoder.encode(cert["signatureAlgorithm"]):
            raise MalformedCertificate("inner and outer signature algorithm identifiers don't match")
        version = int(tbs["version"]) + 1
        if version not in (1, 2, 3):
            raise MalformedCertificate(f"invalid certificate version {version}")
        keyinfo = tbs["subjectPublicKeyInfo"]
        if keyinfo["algorithm"]["algorithm"] in SUPPORTED_ALGORITHMS:
            try:
                spkiutil.public_key_from_spki(keyinfo)
            except spkiutil.DECODE_ERRORS as err:
                raise MalformedCertificate(f"invalid subject public key: {err}") from err
        return cls(
            der=bytes(der),
            version=version,
            serial_number=int(tbs["serialNumber"]),
            signature_algorithm=str(cert["signatureAlgorithm"]["algorithm"]),
            public_key_algorithm=str(keyinfo["algorithm"]["algorithm"]),
            public_key_info=encoder.encode(keyinfo),
        )
