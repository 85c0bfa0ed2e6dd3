"""
Error types raised by codecs, padding and cipher modes.

All of them derive from :class:`ValueError` so callers that already treat
malformed input as a value error keep working.
"""

__all__ = [
    "ByteKitError",
    "InvalidInput",
    "InvalidPadding",
    "ContractViolation",
]


class ByteKitError(Exception):
    """Base class for all bytekit errors."""


class InvalidInput(ByteKitError, ValueError):
    """Radix or escape text is malformed (alphabet, length or grouping)."""


class InvalidPadding(ByteKitError, ValueError):
    """A PKCS#7 trailer failed validation."""


class ContractViolation(ByteKitError, ValueError):
    """A caller-side precondition was violated.

    Raised for wrong key, IV or block sizes, ciphertext that is not
    block-aligned, unsupported integer widths and out-of-range values.
    """
