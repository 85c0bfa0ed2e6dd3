import abc
from collections.abc import Callable

from bytekit.errors import ContractViolation, InvalidPadding
from bytekit.libs.crypto.padding import pad, unpad

BlockCipherFunc = Callable[[bytes], bytes]


class BaseMode(abc.ABC):
    """Base class for block-cipher modes of operation.

    A mode instance wraps a *block cipher primitive* that encrypts or decrypts
    a single block, and provides :meth:`encrypt` and :meth:`decrypt` for
    arbitrary-length data. The final block is PKCS#7 padded on encryption
    and may be unpadded on decryption.

    Mode objects keep no state between calls: every call starts over from
    the configured IV (if any).
    """

    def __init__(
        self,
        encrypt_block: BlockCipherFunc,
        decrypt_block: BlockCipherFunc,
        block_size: int,
        always_pad: bool = True,
    ) -> None:
        """Initialize a block-cipher mode instance.

        Args:
            encrypt_block: Callable that encrypts a single block of length
                ``block_size``.
            decrypt_block: Callable that decrypts a single block of length
                ``block_size``.
            block_size: Block size in bytes (16 for AES).
            always_pad: If ``True`` (canonical PKCS#7), block-aligned
                plaintext gains a full block of padding. If ``False``, only
                a short final block is padded.
        """
        self.encrypt_block = encrypt_block
        self.decrypt_block = decrypt_block
        self.block_size = block_size
        self.always_pad = always_pad

    def _pad_final(self, data: bytes) -> bytes:
        return pad(data, self.block_size, always=self.always_pad)

    def _check_aligned(self, data: bytes) -> None:
        if len(data) % self.block_size != 0:
            raise ContractViolation(
                f"Ciphertext length {len(data)} is not a multiple of "
                f"{self.block_size}"
            )

    def _unpad_final(self, plaintext: bytes) -> bytes:
        """Strip padding from the last block of ``plaintext``."""
        if not plaintext:
            if self.always_pad:
                raise InvalidPadding("Empty ciphertext carries no padding block")
            return plaintext
        bs = self.block_size
        return plaintext[:-bs] + unpad(plaintext[-bs:], bs)

    @abc.abstractmethod
    def encrypt(self, data: bytes) -> bytes:
        """Encrypt plaintext.

        Args:
            data: Plaintext bytes of any length. The final block is padded
                before encryption.

        Returns:
            Ciphertext bytes, a multiple of ``block_size`` long.
        """
        ...

    @abc.abstractmethod
    def decrypt(self, data: bytes, remove_padding: bool = True) -> bytes:
        """Decrypt ciphertext.

        Args:
            data: Ciphertext bytes. The length must be a multiple of
                ``block_size``.
            remove_padding: Whether to strip PKCS#7 padding from the last
                block.

        Returns:
            Plaintext bytes.

        Raises:
            ContractViolation: If the input length is not a multiple of
                ``block_size``.
            InvalidPadding: If ``remove_padding`` is set and the last block
                is not correctly padded.
        """
        ...
