from __future__ import annotations

from bytekit.errors import ContractViolation, InvalidPadding


def _check_block_size(block_size: int) -> None:
    if not (1 <= block_size <= 255):
        raise ContractViolation("block_size must be between 1 and 255")


def pad(data_to_pad: bytes, block_size: int = 16, always: bool = True) -> bytes:
    """Apply PKCS#7 padding to align data to ``block_size``.

    N bytes each equal to N are appended, where N is the distance to the
    next block boundary. An already aligned input receives a full block of
    padding so that :func:`unpad` is never ambiguous.

    Args:
        data_to_pad: Raw input bytes.
        block_size: Block size in bytes. Must be in the range [1, 255].
        always: When ``False``, block-aligned input is returned unchanged
            instead of gaining a full padding block. This matches ciphertext
            produced by tools that only pad a short final block.

    Returns:
        Data padded so its length becomes a multiple of ``block_size``.

    Raises:
        ContractViolation: If ``block_size`` is out of range.
    """
    _check_block_size(block_size)

    data_to_pad = bytes(data_to_pad)
    padding_len = block_size - (len(data_to_pad) % block_size)

    if padding_len == block_size and not always:
        return data_to_pad

    return data_to_pad + bytes([padding_len]) * padding_len


def unpad(padded_data: bytes, block_size: int = 16) -> bytes:
    """Remove PKCS#7 padding previously applied by :func:`pad`.

    Args:
        padded_data: Input data with padding applied. Length must be a
            multiple of ``block_size``.
        block_size: Block size in bytes. Must be in the range [1, 255].

    Returns:
        The original unpadded data.

    Raises:
        ContractViolation: If ``block_size`` is out of range.
        InvalidPadding: If the input is empty, misaligned, or its trailer is
            not N bytes of value N with ``1 <= N <= block_size``.
    """
    _check_block_size(block_size)

    pdata_len = len(padded_data)

    if pdata_len == 0:
        raise InvalidPadding("Zero-length input cannot be unpadded")

    if pdata_len % block_size:
        raise InvalidPadding("Input data is not padded")

    padding_len = padded_data[-1]

    if padding_len < 1 or padding_len > block_size:
        raise InvalidPadding("Padding is incorrect")

    if bytes(padded_data[-padding_len:]) != bytes([padding_len]) * padding_len:
        raise InvalidPadding("Padding is incorrect")

    return bytes(padded_data[:-padding_len])
