from __future__ import annotations

from bytekit.errors import ContractViolation

BytesLike = bytes | bytearray | memoryview

INT_WIDTHS = (1, 2, 4, 8)  #: supported integer widths in bytes


def as_bytes(data: BytesLike | str) -> bytes:
    """Return an immutable copy of ``data``; text is encoded as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def check_width(width: int) -> None:
    """Ensure ``width`` is one of :data:`INT_WIDTHS`.

    Raises:
        ContractViolation: If the width is unsupported.
    """
    if width not in INT_WIDTHS:
        raise ContractViolation(
            f"Unsupported integer width: {width} (expected 1, 2, 4 or 8 bytes)"
        )


def int_to_bytes(value: int, width: int) -> bytes:
    """Split an unsigned integer into ``width`` bytes, most significant first.

    The bytes are taken by shifting, so the result never depends on host
    byte order.

    Args:
        value: Unsigned integer to split.
        width: Width of the integer in bytes (1, 2, 4 or 8).

    Returns:
        Exactly ``width`` bytes.

    Raises:
        ContractViolation: If the width is unsupported or ``value`` does not
            fit in ``width`` unsigned bytes.
    """
    check_width(width)
    if not 0 <= value < 1 << (8 * width):
        raise ContractViolation(
            f"Value {value} does not fit in an unsigned {8 * width}-bit integer"
        )
    return bytes((value >> (8 * shift)) & 0xFF for shift in range(width - 1, -1, -1))


def bytes_to_int(data: bytes) -> int:
    """Join bytes into an unsigned integer, most significant byte first."""
    value = 0
    for byte in data:
        value = (value << 8) | byte
    return value
