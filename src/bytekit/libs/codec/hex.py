"""
Hexadecimal codec.

Output is uppercase, two digits per byte, optionally grouped with spaces.
Decoding is case-insensitive and ignores spaces.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from bytekit.errors import ContractViolation, InvalidInput

from ._common import (
    INT_WIDTHS,
    BytesLike,
    as_bytes,
    bytes_to_int,
    check_width,
    int_to_bytes,
)

__all__ = ["encode", "encode_int", "decode", "decode_int", "is_hex_digit"]

logger = logging.getLogger(__name__)

HEX_ALPHABET = "0123456789ABCDEF"

# ASCII digits in both cases only
_NIBBLES = MappingProxyType(
    {ch: i for i, ch in enumerate(HEX_ALPHABET)}
    | {ch.lower(): i for i, ch in enumerate(HEX_ALPHABET)}
)


def encode(data: BytesLike | str, delimited: bool = True, group: int = 1) -> str:
    """Render bytes as a hex string.

    Args:
        data: Bytes to encode. Text is encoded as UTF-8 first.
        delimited: Whether to separate groups with a single space.
        group: Number of bytes per delimited group (1, 2, 4 or 8).

    Returns:
        Uppercase hex string with no trailing space.

    Raises:
        ContractViolation: If ``group`` is unsupported.
    """
    if group not in INT_WIDTHS:
        raise ContractViolation(f"Unsupported hex group size: {group}")

    pairs = [
        HEX_ALPHABET[byte >> 4] + HEX_ALPHABET[byte & 0x0F] for byte in as_bytes(data)
    ]
    if not delimited:
        return "".join(pairs)
    return " ".join("".join(pairs[i : i + group]) for i in range(0, len(pairs), group))


def encode_int(
    value: int,
    width: int = 4,
    delimited: bool = True,
    group: int = 1,
) -> str:
    """Render a fixed-width unsigned integer as a hex string.

    Args:
        value: Unsigned integer to encode.
        width: Integer width in bytes (1, 2, 4 or 8).
        delimited: Whether to separate groups with a single space.
        group: Number of bytes per delimited group.

    Returns:
        ``2 * width`` hex digits, most significant byte first.
    """
    return encode(int_to_bytes(value, width), delimited, group)


def decode(text: str) -> bytes:
    """Parse a hex string back into bytes.

    Args:
        text: Hex string in either case, spaces allowed. Only the ASCII
            digits ``0-9``, ``a-f`` and ``A-F`` are accepted.

    Returns:
        The decoded bytes.

    Raises:
        InvalidInput: On odd digit count or a non-hex character.
    """
    digits = text.replace(" ", "")

    if len(digits) & 1:
        logger.debug("hex decode rejected odd length %d", len(digits))
        raise InvalidInput("Hex strings must be even in length")

    for idx, ch in enumerate(digits):
        if not is_hex_digit(ch):
            raise InvalidInput(f"Invalid hex char {ch!r} at index {idx}")

    return bytes(
        (_NIBBLES[digits[i]] << 4) | _NIBBLES[digits[i + 1]]
        for i in range(0, len(digits), 2)
    )


def decode_int(text: str, width: int = 4) -> int:
    """Parse a hex string into a fixed-width unsigned integer.

    Raises:
        ContractViolation: If the width is unsupported.
        InvalidInput: If the input is malformed or does not hold exactly
            ``width`` bytes.
    """
    check_width(width)
    raw = decode(text)
    if len(raw) != width:
        raise InvalidInput(f"Input holds {len(raw)} bytes, expected exactly {width}")
    return bytes_to_int(raw)


def is_hex_digit(ch: str) -> bool:
    """Return True if ``ch`` is a single ASCII hex digit in either case."""
    return ch in _NIBBLES
