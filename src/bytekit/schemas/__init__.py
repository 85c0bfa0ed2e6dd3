"""
Data contracts and type definitions.
"""

__all__ = [
    "CipherConfig",
    "CipherModeName",
    "CodecConfig",
]

from .config import CipherConfig, CipherModeName, CodecConfig
