"""
Base64 codec over the standard alphabet.

Every 3 input bytes are packed into one 24-bit number and split into four
6-bit alphabet indices. A short final group is written with 2 or 3
characters and, unless disabled, ``=`` padding up to 4.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from bytekit.errors import InvalidInput

from ._common import BytesLike, as_bytes

__all__ = ["encode", "decode"]

logger = logging.getLogger(__name__)

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD_CHAR = "="

_INDEX = MappingProxyType({ch: i for i, ch in enumerate(BASE64_ALPHABET)})


def encode(data: BytesLike | str, padded: bool = True) -> str:
    """Encode bytes as base64 text.

    Args:
        data: Bytes to encode. Text is encoded as UTF-8 first.
        padded: Whether to append ``=`` padding to a multiple of 4 chars.

    Returns:
        The base64 string, ``""`` for empty input.
    """
    raw = as_bytes(data)
    size = len(raw)
    out: list[str] = []

    for i in range(0, size, 3):
        chunk = raw[i : i + 3]
        n = chunk[0] << 16
        if len(chunk) > 1:
            n |= chunk[1] << 8
        if len(chunk) > 2:
            n |= chunk[2]

        out.append(BASE64_ALPHABET[(n >> 18) & 63])
        out.append(BASE64_ALPHABET[(n >> 12) & 63])
        if len(chunk) > 1:
            out.append(BASE64_ALPHABET[(n >> 6) & 63])
        if len(chunk) > 2:
            out.append(BASE64_ALPHABET[n & 63])

    if padded:
        out.append(PAD_CHAR * (-size % 3))

    return "".join(out)


def _payload(text: str) -> str:
    """Validate ``text`` and return it without its padding."""
    if len(text) < 2:
        raise InvalidInput("Input is too short for valid base64, need at least 2 chars")

    for idx, ch in enumerate(text):
        if ch != PAD_CHAR and ch not in _INDEX:
            raise InvalidInput(f"Invalid base64 char {ch!r} at index {idx}")

    end = text.find(PAD_CHAR)
    if end == -1:
        body = text
    else:
        tail = text[end:]
        if tail.strip(PAD_CHAR):
            raise InvalidInput(f"Unexpected data after padding at index {end}")
        if len(tail) > 2:
            raise InvalidInput(f"Too much padding: {len(tail)} '=' chars")
        if len(text) % 4:
            raise InvalidInput("Padded base64 length must be a multiple of 4")
        body = text[:end]

    if len(body) % 4 == 1:
        logger.debug("base64 decode rejected a 1-char final group")
        raise InvalidInput("Truncated base64 input, only one char in final group")

    return body


def decode(text: str) -> bytes:
    """Decode base64 text into bytes.

    Padding is optional, but when present it must be well formed.

    Args:
        text: Base64 string.

    Returns:
        The decoded bytes. ``""`` decodes to ``b""``.

    Raises:
        InvalidInput: If the text is too short, contains characters outside
            the alphabet, has misplaced or excess padding, ends in a
            truncated group, or sets unused bits in its final group.
    """
    if not text:
        return b""

    body = _payload(text)
    out = bytearray()

    for i in range(0, len(body), 4):
        group = body[i : i + 4]
        n = 0
        for j, ch in enumerate(group):
            n |= _INDEX[ch] << (18 - 6 * j)

        # bits below the last emitted byte must be zero
        if (len(group) == 2 and n & 0xFFFF) or (len(group) == 3 and n & 0xFF):
            raise InvalidInput(f"Non-zero trailing bits in final group at index {i}")

        out.append((n >> 16) & 0xFF)
        if len(group) > 2:
            out.append((n >> 8) & 0xFF)
        if len(group) > 3:
            out.append(n & 0xFF)

    return bytes(out)
