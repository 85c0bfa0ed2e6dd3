"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass
from typing import Literal

CipherModeName = Literal["ecb", "cbc"]


@dataclass
class CodecConfig:
    """Default formatting for the radix codecs.

    Attributes:
        binary_delimited: Put a space between bytes in binary output.
        hex_delimited: Put a space between groups in hex output.
        hex_group: Bytes per delimited hex group (1, 2, 4 or 8).
        base64_padded: Append ``=`` padding to base64 output.
    """

    binary_delimited: bool = True
    hex_delimited: bool = True
    hex_group: int = 1
    base64_padded: bool = True


@dataclass
class CipherConfig:
    """Defaults for AES mode operations.

    Attributes:
        mode: Cipher mode name, ``"ecb"`` or ``"cbc"``.
        always_pad: Canonical PKCS#7 padding. ``False`` pads only a short
            final block, as some legacy tools do.
        remove_padding: Strip padding from the last block on decryption.
        allow_zero_iv: Let CBC fall back to an all-zero IV when none is given.
    """

    mode: CipherModeName = "cbc"
    always_pad: bool = True
    remove_padding: bool = True
    allow_zero_iv: bool = True
