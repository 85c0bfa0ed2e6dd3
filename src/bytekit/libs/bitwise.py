from __future__ import annotations

from bytekit.errors import ContractViolation


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two byte sequences of equal length.

    Args:
        a: First byte sequence.
        b: Second byte sequence.

    Returns:
        The XOR result as a new byte sequence.

    Raises:
        ContractViolation: If the lengths differ.
    """
    if len(a) != len(b):
        raise ContractViolation(f"Cannot XOR {len(a)} bytes with {len(b)} bytes")
    return bytes(x ^ y for x, y in zip(a, b, strict=True))


def xor_with_key(data: bytes, key: bytes) -> bytes:
    """XOR ``data`` against ``key`` repeated to the same length.

    Standalone helper for callers; the cipher modes use :func:`xor_bytes`.

    Raises:
        ContractViolation: If ``key`` is empty.
    """
    if not key:
        raise ContractViolation("Key must not be empty")
    klen = len(key)
    return bytes(ch ^ key[i % klen] for i, ch in enumerate(data))
