"""Standard base64 encoding with padded or unpadded decoding."""

from __future__ import annotations

import binascii

__all__ = ["Base64Error", "encode", "encode_str", "decode"]

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VALID = frozenset(_ALPHABET)
_PAD = "="


class Base64Error(ValueError):
    """Raised when a string is not valid base64."""


def encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as padded base64 text."""
    return binascii.b2a_base64(bytes(data), newline=False).decode("ascii")


def encode_str(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` as padded base64 text."""
    return encode(text.encode("utf-8"))


def _is_valid(encoded: str) -> bool:
    if len(encoded) % 4 == 1:
        return False
    body, penultimate, last = encoded[:-2], encoded[-2], encoded[-1]
    if not all(c in _VALID for c in body):
        return False
    if penultimate not in _VALID:
        return penultimate == _PAD and last == _PAD
    return last in _VALID or last == _PAD


def decode(encoded: str) -> bytes:
    """Decode base64 text; trailing padding is optional.

    Raises Base64Error when the text is not valid base64.
    """
    if not encoded:
        return b""
    if not _is_valid(encoded):
        raise Base64Error(f"invalid base64 string: {encoded!r}")
    unpadded = encoded.partition(_PAD)[0]
    if len(unpadded) % 4 == 1:
        raise Base64Error(f"invalid base64 string: {encoded!r}")
    padded = unpadded + _PAD * (-len(unpadded) % 4)
    try:
        return binascii.a2b_base64(padded.encode("ascii"))
    except binascii.Error as exc:
        raise Base64Error(f"invalid base64 string: {encoded!r}") from exc