from __future__ import annotations

from bytekit.errors import InvalidInput
from bytekit.libs.codec import hex as hex_codec
from bytekit.libs.codec._common import BytesLike, as_bytes

_ESCAPES = {
    0x0A: "\\n",
    0x0D: "\\r",
    0x5C: "\\\\",
}

_CONTROL = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
}


def escape(data: BytesLike | str) -> str:
    """Render bytes as printable ASCII.

    Newline, carriage return and backslash use their short escapes. Any
    other byte outside 0x20..0x7E becomes ``\\xHH``.
    """
    out: list[str] = []
    for byte in as_bytes(data):
        if byte in _ESCAPES:
            out.append(_ESCAPES[byte])
        elif byte <= 0x1F or byte >= 0x7F:
            out.append("\\x" + hex_codec.encode(bytes([byte])))
        else:
            out.append(chr(byte))
    return "".join(out)


def unescape(text: str) -> bytes:
    """Reverse :func:`escape` and the common C control escapes.

    An unknown escape ``\\c`` yields ``c`` itself.

    Raises:
        InvalidInput: If a backslash or ``\\x`` escape is cut short, or the
            two characters after ``\\x`` are not hex digits.
    """
    out = bytearray()
    pos = 0
    end = len(text)

    while pos < end:
        ch = text[pos]
        if ch != "\\":
            out += ch.encode("utf-8")
            pos += 1
            continue

        if pos + 1 >= end:
            raise InvalidInput("Need at least 1 more char for escape sequence")

        code = text[pos + 1]
        if code == "x":
            if pos + 4 > end:
                raise InvalidInput("Ran out of data for hex escape sequence")
            digits = text[pos + 2 : pos + 4]
            if not all(hex_codec.is_hex_digit(d) for d in digits):
                raise InvalidInput(f"Invalid hex escape \\x{digits} at index {pos}")
            out += hex_codec.decode(digits)
            pos += 4
        elif code in _CONTROL:
            out.append(_CONTROL[code])
            pos += 2
        else:
            out += code.encode("utf-8")
            pos += 2

    return bytes(out)
