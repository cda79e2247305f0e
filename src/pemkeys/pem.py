"""Handles the PEM armor around DER payloads.

Splits textual PEM into its label, optional RFC 1421 headers and binary payload, and armors payloads back into text.
Decoding never raises on garbage; it simply reports that no block was found and lets the caller decide.

Typical usage example:

    block, rest = decode_pem(open("cert.pem").read())
    text = encode_pem("PUBLIC KEY", der)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii
import dataclasses

from pemkeys.errors import MalformedInput

_BEGIN = b"-----BEGIN "
_END = b"-----END "
_DASHES = b"-----"
_LINE_WIDTH = 64


@dataclasses.dataclass(frozen=True)
class PemBlock:
    """A single decoded PEM block.

    Attributes:
        label: The text between `BEGIN ` and the trailing dashes, e.g. `CERTIFICATE`.
        payload: The base64-decoded body, usually DER.
        headers: Any `Key: value` headers found above the body, as pairs in file order.
    """
    label: str
    payload: bytes
    headers: tuple[tuple[str, str], ...] = ()

    def header(self, key: str) -> str | None:
        """Looks up a header by name, or None if absent."""
        return next((value for name, value in self.headers if name == key), None)


def _at_line_start(data: bytes, idx: int) -> bool:
    return idx == 0 or data[idx - 1:idx] in (b"\n", b"\r")


def _read_block(label: bytes, body: bytes) -> tuple[PemBlock, bytes] | None:
    """Reads everything between the BEGIN line and the matching END line.

    Args:
        label: The label announced on the BEGIN line.
        body: Data following the BEGIN line.

    Returns:
        The block and whatever follows its END line, or None if the block is not well-formed.
    """
    footer = _END + label + _DASHES
    end = body.find(footer)
    while end >= 0 and not _at_line_start(body, end):
        end = body.find(footer, end + 1)
    if end < 0:
        return None
    _, _, rest = body[end + len(footer):].partition(b"\n")
    lines = [line.strip() for line in body[:end].splitlines()]
    headers = []
    while lines and b":" in lines[0]:
        key, _, value = lines.pop(0).partition(b":")
        headers.append((key.strip().decode("latin-1"), value.strip().decode("latin-1")))
    if headers and lines and not lines[0]:
        lines.pop(0)
    try:
        payload = base64.b64decode(b"".join(lines), validate=True)
    except binascii.Error:
        return None
    return PemBlock(label.decode("latin-1"), payload, tuple(headers)), rest


def decode_pem(data: str | bytes) -> tuple[PemBlock | None, bytes]:
    """Finds and decodes the first well-formed PEM block.

    Blocks with a missing footer or a body that is not valid base64 are skipped, and the search resumes after
    their BEGIN line.

    Args:
        data: PEM text, as str or bytes.

    Returns:
        The decoded block and the bytes following it. If no block is found, None and the untouched input.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    rest = data
    while True:
        start = rest.find(_BEGIN)
        if start < 0:
            return None, data
        after = rest[start + len(_BEGIN):]
        if not _at_line_start(rest, start):
            rest = after
            continue
        line, _, body = after.partition(b"\n")
        line = line.rstrip(b"\r\t ")
        if not line.endswith(_DASHES):
            rest = after
            continue
        found = _read_block(line[:-len(_DASHES)], body)
        if found is not None:
            return found
        rest = after


def require_pem(data: str | bytes) -> PemBlock:
    """Like `decode_pem`, but insists on a block.

    Raises:
        MalformedInput: If no PEM block could be found.
    """
    block, _ = decode_pem(data)
    if block is None:
        raise MalformedInput()
    return block


def encode_pem(label: str, payload: bytes) -> str:
    """Armors a payload in PEM.

    Args:
        label: The block label, e.g. `PUBLIC KEY`.
        payload: The bytes to armor.

    Returns:
        PEM text, newline-terminated.
    """
    body = base64.b64encode(payload).decode("ascii")
    res = "\n".join(body[i:i + _LINE_WIDTH] for i in range(0, len(body), _LINE_WIDTH))
    res += "\n" if res else ""
    return f"-----BEGIN {label}-----\n{res}-----END {label}-----\n"
