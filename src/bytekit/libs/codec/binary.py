"""
Binary-digit codec.

Each byte is written as eight ``'0'``/``'1'`` characters, most significant
bit first, optionally with a single space between consecutive bytes::

    >>> encode(b"AB")
    '01000001 01000010'
    >>> decode_int("00000001 00000000", width=2)
    256
"""

from __future__ import annotations

import logging

from bytekit.errors import InvalidInput

from ._common import BytesLike, as_bytes, bytes_to_int, check_width, int_to_bytes

__all__ = ["encode", "encode_int", "decode", "decode_int"]

logger = logging.getLogger(__name__)

BINARY_ALPHABET = "01"


def encode(data: BytesLike | str, delimited: bool = True) -> str:
    """Render bytes as a binary-digit string.

    Args:
        data: Bytes to encode. Text is encoded as UTF-8 first.
        delimited: Whether to put a space between consecutive bytes.

    Returns:
        The binary-digit string, ``""`` for empty input.
    """
    sep = " " if delimited else ""
    return sep.join(f"{byte:08b}" for byte in as_bytes(data))


def encode_int(value: int, width: int = 4, delimited: bool = True) -> str:
    """Render a fixed-width unsigned integer as a binary-digit string.

    Args:
        value: Unsigned integer to encode.
        width: Integer width in bytes (1, 2, 4 or 8).
        delimited: Whether to put a space between consecutive bytes.

    Returns:
        ``8 * width`` digits, most significant byte first.

    Raises:
        ContractViolation: If the width is unsupported or the value is out
            of range.
    """
    return encode(int_to_bytes(value, width), delimited)


def _strip(text: str) -> str:
    """Remove delimiters and validate length and alphabet."""
    bits = text.replace(" ", "")

    if len(bits) % 8 != 0:
        logger.debug("binary decode rejected %d bits", len(bits))
        raise InvalidInput("Input length not divisible by 8")

    for idx, ch in enumerate(bits):
        if ch not in BINARY_ALPHABET:
            raise InvalidInput(f"Invalid binary char {ch!r} at index {idx}")

    return bits


def _pack(bits: str) -> bytes:
    out = bytearray(len(bits) // 8)
    for i in range(len(out)):
        byte = 0
        for ch in bits[i * 8 : i * 8 + 8]:
            byte = (byte << 1) | (ch == "1")
        out[i] = byte
    return bytes(out)


def decode(text: str) -> bytes:
    """Parse a binary-digit string back into bytes.

    Spaces are ignored anywhere in the input.

    Args:
        text: Binary-digit string.

    Returns:
        The decoded bytes.

    Raises:
        InvalidInput: If the digit count is not a multiple of 8 or a
            character other than ``'0'``/``'1'`` is present.
    """
    return _pack(_strip(text))


def decode_int(text: str, width: int = 4) -> int:
    """Parse a binary-digit string into a fixed-width unsigned integer.

    Args:
        text: Binary-digit string, most significant byte first.
        width: Expected integer width in bytes (1, 2, 4 or 8).

    Returns:
        The decoded integer.

    Raises:
        ContractViolation: If the width is unsupported.
        InvalidInput: If the input is malformed or does not hold exactly
            ``width`` bytes.
    """
    check_width(width)
    bits = _strip(text)
    if len(bits) // 8 != width:
        raise InvalidInput(
            f"Input holds {len(bits) // 8} bytes, expected exactly {width}"
        )
    return bytes_to_int(_pack(bits))
