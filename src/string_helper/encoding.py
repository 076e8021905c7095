"""Base64, UTF-8 and hash format helpers."""

from __future__ import annotations

import base64
import re

_URL_SAFE_OUT = str.maketrans("+/=", "-_.")
_URL_SAFE_IN = str.maketrans("-_.", "+/=")
_HEX_RE = re.compile(r"[0-9a-fA-F]*")
_JSON_COMPATIBLE = str.maketrans({"\n": None, "\r": None, "'": '"'})


def url_safe_b64_encode(data: str | bytes) -> str:
    """Base64 with ``+ / =`` replaced by ``- _ .`` so it can sit in a URL."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("ascii").translate(_URL_SAFE_OUT)


def url_safe_b64_decode(s: str) -> bytes:
    """Inverse of :func:`url_safe_b64_encode`; missing padding is restored.

    Raises ``binascii.Error`` (a ValueError) for data that is not base64.
    """
    data = s.translate(_URL_SAFE_IN)
    if not data:
        return b""
    remainder = len(data) % 4
    if remainder:
        data += "=" * (4 - remainder)
    return base64.b64decode(data, validate=True)


def is_utf8(data: str | bytes) -> bool:
    """True if *data* contains multi-byte UTF-8 sequences."""
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            return False
        return len(data) > len(text)
    return len(data.encode("utf-8")) > len(data)


def is_base64_encoded_string(s: str) -> bool:
    try:
        base64.b64decode(s, validate=True)
    except ValueError:
        return False
    return True


def is_hexadecimal_hash(s: str, min_len: int = 0) -> bool:
    return len(s) >= min_len and _HEX_RE.fullmatch(s) is not None


def format_json_compatible(s: str) -> str:
    """Strip line breaks and turn single quotes into double quotes."""
    return s.translate(_JSON_COMPATIBLE)
