"""Exceptions raised while decoding, comparing or classifying keys and certificates.

All errors derive from `PemKeysError`, so callers may catch at whichever granularity they need. Decoder errors
coming from the underlying DER primitives are chained rather than reinterpreted.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class PemKeysError(Exception):
    """Base class for every error raised by pemkeys."""


class MalformedInput(PemKeysError):
    """No PEM block could be found in the supplied text."""

    def __init__(self, message: str = "data does not contain a valid PEM block") -> None:
        super().__init__(message)


class MalformedPrivateKey(PemKeysError):
    """A PEM block was found, but its payload is not a valid private key of the requested family."""


class MalformedCertificate(PemKeysError):
    """A PEM block was found, but its payload is not a valid X.509 certificate."""


class UnsupportedCurve(PemKeysError):
    """An EC structure decoded fine but names a curve we have no domain parameters for.

    Attributes:
        curve: Dotted OID (or description) of the curve found.
    """

    def __init__(self, curve: str) -> None:
        super().__init__(f"unsupported elliptic curve: {curve}")
        self.curve = curve


class UnsupportedKeyType(PemKeysError):
    """A key structure decoded to a family that is recognized but not handled.

    Attributes:
        type_name: The concrete key type discovered.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"unsupported key type: {type_name}")
        self.type_name = type_name


class IncomparableKeyTypes(PemKeysError):
    """Two keys of different families were handed to the comparator.

    Attributes:
        first: Type name of the first key.
        second: Type name of the second key.
    """

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"key types do not match: {first} and {second}")
        self.first = first
        self.second = second
