from __future__ import annotations

from ._mode_base import BaseMode, BlockCipherFunc


class ECBMode(BaseMode):
    """Electronic Code Book (ECB) mode.

    ECB is stateless: each block is processed independently without an IV or
    chaining. This mode provides no semantic security and is included mainly
    for compatibility with existing data.
    """

    def __init__(
        self,
        encrypt_block: BlockCipherFunc,
        decrypt_block: BlockCipherFunc,
        block_size: int,
        always_pad: bool = True,
    ) -> None:
        """Initialize an ECB mode instance.

        Args:
            encrypt_block: Block encryption function. See :class:`BaseMode`.
            decrypt_block: Block decryption function. See :class:`BaseMode`.
            block_size: Block size in bytes. See :class:`BaseMode`.
            always_pad: Padding policy. See :class:`BaseMode`.
        """
        super().__init__(encrypt_block, decrypt_block, block_size, always_pad)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt data in ECB mode.

        Args:
            data: Plaintext bytes of any length.

        Returns:
            Ciphertext bytes.
        """
        bs = self.block_size
        data = self._pad_final(bytes(data))

        out = bytearray()
        for i in range(0, len(data), bs):
            out += self.encrypt_block(data[i : i + bs])
        return bytes(out)

    def decrypt(self, data: bytes, remove_padding: bool = True) -> bytes:
        """Decrypt data in ECB mode.

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
        for i in range(0, len(data), bs):
            out += self.decrypt_block(data[i : i + bs])

        if remove_padding:
            return self._unpad_final(bytes(out))
        return bytes(out)
