from __future__ import annotations

from Crypto.Cipher import AES as _PyAES

from bytekit.errors import ContractViolation

from ._mode_base import BaseMode

block_size = 16
key_size = (16,)

MODE_ECB = 1  #: Electronic Code Book
MODE_CBC = 2  #: Cipher-Block Chaining


class _AESContext:
    """AES-128 single-block primitive.

    The round transform and key schedule come from pycryptodome; this class
    only binds a key and enforces block and key sizes.
    """

    __slots__ = ("_cipher",)

    def __init__(self, key: bytes) -> None:
        """Initialize the AES key schedule.

        Args:
            key: AES-128 key of length 16 bytes.

        Raises:
            ContractViolation: If the key length is invalid.
        """
        if len(key) not in key_size:
            raise ContractViolation(
                f"Invalid key size: {len(key)} bytes, expected {block_size}"
            )
        self._cipher = _PyAES.new(bytes(key), _PyAES.MODE_ECB)

    def encrypt_block(self, plaintext: bytes) -> bytes:
        """Encrypt a single 16-byte block.

        Raises:
            ContractViolation: If the block size is not 16 bytes.
        """
        if len(plaintext) != block_size:
            raise ContractViolation("Plaintext block must be 16 bytes")
        return self._cipher.encrypt(bytes(plaintext))

    def decrypt_block(self, ciphertext: bytes) -> bytes:
        """Decrypt a single 16-byte block.

        Raises:
            ContractViolation: If the block size is not 16 bytes.
        """
        if len(ciphertext) != block_size:
            raise ContractViolation("Ciphertext block must be 16 bytes")
        return self._cipher.decrypt(bytes(ciphertext))


def encrypt_block(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt one 16-byte block under a 16-byte key."""
    return _AESContext(bytes(key)).encrypt_block(plaintext)


def decrypt_block(ciphertext: bytes, key: bytes) -> bytes:
    """Decrypt one 16-byte block under a 16-byte key."""
    return _AESContext(bytes(key)).decrypt_block(ciphertext)


def new(
    key: bytes | bytearray,
    mode: int,
    iv: bytes | bytearray | None = None,
    *,
    always_pad: bool = True,
    allow_zero_iv: bool = True,
) -> BaseMode:
    """Create an AES-128 cipher object in the requested mode.

    Args:
        key: A 16-byte AES key.
        mode: Either ``MODE_ECB`` or ``MODE_CBC``.
        iv: Initialization vector for CBC mode. Must be 16 bytes. If ``None``,
            a zero IV is used unless ``allow_zero_iv`` is ``False``.
        always_pad: Canonical PKCS#7 (``True``) or pad only a short final
            block (``False``).
        allow_zero_iv: Whether a missing CBC IV may default to zeros.

    Returns:
        A mode object implementing AES encryption and decryption.

    Raises:
        ContractViolation: If the key length, IV length, or mode is invalid.
    """
    ctx = _AESContext(bytes(key))
    encrypt_block = ctx.encrypt_block
    decrypt_block = ctx.decrypt_block

    if mode == MODE_ECB:
        from ._mode_ecb import ECBMode

        return ECBMode(encrypt_block, decrypt_block, block_size, always_pad)

    if mode == MODE_CBC:
        from ._mode_cbc import CBCMode

        return CBCMode(
            encrypt_block,
            decrypt_block,
            block_size,
            None if iv is None else bytes(iv),
            always_pad=always_pad,
            allow_zero_iv=allow_zero_iv,
        )

    raise ContractViolation("Unknown mode")


def ecb_encrypt(data: bytes, key: bytes, *, always_pad: bool = True) -> bytes:
    """Encrypt ``data`` with AES-128 in ECB mode, padding the final block."""
    return new(key, MODE_ECB, always_pad=always_pad).encrypt(data)


def ecb_decrypt(
    data: bytes,
    key: bytes,
    remove_padding: bool = True,
    *,
    always_pad: bool = True,
) -> bytes:
    """Decrypt AES-128 ECB ciphertext, optionally unpadding the last block."""
    return new(key, MODE_ECB, always_pad=always_pad).decrypt(data, remove_padding)


def cbc_encrypt(
    data: bytes,
    key: bytes,
    iv: bytes | None = None,
    *,
    always_pad: bool = True,
) -> bytes:
    """Encrypt ``data`` with AES-128 in CBC mode, padding the final block."""
    return new(key, MODE_CBC, iv, always_pad=always_pad).encrypt(data)


def cbc_decrypt(
    data: bytes,
    key: bytes,
    iv: bytes | None = None,
    remove_padding: bool = True,
    *,
    always_pad: bool = True,
) -> bytes:
    """Decrypt AES-128 CBC ciphertext, optionally unpadding the last block."""
    return new(key, MODE_CBC, iv, always_pad=always_pad).decrypt(data, remove_padding)
