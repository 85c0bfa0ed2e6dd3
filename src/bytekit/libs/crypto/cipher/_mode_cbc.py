from __future__ import annotations

from bytekit.errors import ContractViolation
from bytekit.libs.bitwise import xor_bytes

from ._mode_base import BaseMode, BlockCipherFunc


class CBCMode(BaseMode):
    """Cipher Block Chaining (CBC) mode.

    Each plaintext block is XORed with the previous ciphertext block (the IV
    for the first block) before encryption. The chaining value lives only
    for the duration of one :meth:`encrypt` or :meth:`decrypt` call.
    """

    def __init__(
        self,
        encrypt_block: BlockCipherFunc,
        decrypt_block: BlockCipherFunc,
        block_size: int,
        iv: bytes | None,
        always_pad: bool = True,
        allow_zero_iv: bool = True,
    ) -> None:
        """Initialize a CBC mode instance.

        Args:
            encrypt_block: Block encryption function. See :class:`BaseMode`.
            decrypt_block: Block decryption function. See :class:`BaseMode`.
            block_size: Block size in bytes. See :class:`BaseMode`.
            iv: Initialization vector. Must be exactly ``block_size`` bytes.
                If ``None``, a zero IV is used (kept for compatibility, not
                recommended for real cryptographic use).
            always_pad: Padding policy. See :class:`BaseMode`.
            allow_zero_iv: When ``False``, ``iv=None`` is rejected instead of
                falling back to a zero IV.

        Raises:
            ContractViolation: If ``iv`` does not match ``block_size`` or is
                missing while ``allow_zero_iv`` is ``False``.
        """
        super().__init__(encrypt_block, decrypt_block, block_size, always_pad)
        if iv is None:
            if not allow_zero_iv:
                raise ContractViolation("An explicit IV is required")
            iv = bytes(block_size)
        if len(iv) != block_size:
            raise ContractViolation(
                f"Invalid IV size: {len(iv)} bytes, expected {block_size}"
            )
        self.iv = bytes(iv)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt data in CBC mode.

        Blocks are processed strictly in order because each block's input
        depends on the ciphertext of the one before it.

        Args:
            data: Plaintext bytes of any length.

        Returns:
            Ciphertext bytes.
        """
        bs = self.block_size
        data = self._pad_final(bytes(data))

        out = bytearray()
        prev = self.iv

        for i in range(0, len(data), bs):
            block = data[i : i + bs]
            ct = self.encrypt_block(xor_bytes(block, prev))
            out += ct
            prev = ct

        return bytes(out)

    def decrypt(self, data: bytes, remove_padding: bool = True) -> bytes:
        """Decrypt data in CBC mode.

        Args:
            data: Ciphertext bytes. Length must be a multiple of
                ``block_size``.
            remove_padding: Whether to unpad the last block.

        Returns:
            Plaintext bytes.

        Raises:
            ContractViolation: If the input length is not a multiple of
                ``block_size``.
            InvalidPadding: If the last block is not correctly padded.
        """
        bs = self.block_size
        data = bytes(data)
        self._check_aligned(data)

        out = bytearray()
        prev = self.iv

        for i in range(0, len(data), bs):
            block = data[i : i + bs]
            out += xor_bytes(self.decrypt_block(block), prev)
            prev = block

        if remove_padding:
            return self._unpad_final(bytes(out))
        return bytes(out)
