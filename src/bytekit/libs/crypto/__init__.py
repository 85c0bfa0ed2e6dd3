"""
Block-cipher modes and PKCS#7 padding.
"""

__all__ = ["pad", "unpad"]

from .padding import pad, unpad
