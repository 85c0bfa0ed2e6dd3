"""
Radix codecs: binary-digit, hexadecimal and base64 text <-> bytes.
"""

__all__ = [
    "b64",
    "binary",
    "hex",
]

from . import b64, binary, hex
