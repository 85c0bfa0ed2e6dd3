"""
AES-128 in ECB and CBC modes over a pycryptodome block primitive.
"""

__all__ = ["AES", "BaseMode", "CBCMode", "ECBMode"]

from . import AES
from ._mode_base import BaseMode
from ._mode_cbc import CBCMode
from ._mode_ecb import ECBMode
