from __future__ import annotations

import random

import pytest
from Crypto.Cipher import AES as RefAES
from Crypto.Util.Padding import pad as ref_pad

from bytekit.errors import ContractViolation, InvalidPadding
from bytekit.libs.crypto.cipher import AES

_rng = random.Random(20251123)

LENGTHS = [0, 15, 16, 17, 33]


def randbytes(n: int) -> bytes:
    return bytes(_rng.randrange(0, 256) for _ in range(n))


# ===========================================================
# Block primitive
# ===========================================================


def test_aes_block_fips197_vector():
    key = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
    pt = bytes.fromhex("00112233445566778899aabbccddeeff")
    ct = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")

    assert AES.encrypt_block(pt, key) == ct
    assert AES.decrypt_block(ct, key) == pt


def test_aes_block_rejects_wrong_sizes():
    key = randbytes(16)
    with pytest.raises(ContractViolation):
        AES.encrypt_block(b"\x00" * 15, key)
    with pytest.raises(ContractViolation):
        AES.decrypt_block(b"\x00" * 17, key)
    with pytest.raises(ContractViolation):
        AES.encrypt_block(b"\x00" * 16, b"\x00" * 24)


# ===========================================================
# Encryption matches reference
# ===========================================================


@pytest.mark.parametrize("n", LENGTHS + [64, 100])
def test_aes_ecb_encrypt_matches_pycryptodome(n):
    key = randbytes(16)
    pt = randbytes(n)

    ref = RefAES.new(key, RefAES.MODE_ECB)
    assert AES.ecb_encrypt(pt, key) == ref.encrypt(ref_pad(pt, 16))


@pytest.mark.parametrize("nblocks", [0, 1, 3, 5])
def test_aes_ecb_decrypt_without_unpad_matches_pycryptodome(nblocks):
    key = randbytes(16)
    pt = randbytes(16 * nblocks)

    ct = RefAES.new(key, RefAES.MODE_ECB).encrypt(pt)
    assert AES.ecb_decrypt(ct, key, remove_padding=False) == pt


# ===========================================================
# Round trips
# ===========================================================


@pytest.mark.parametrize("n", LENGTHS)
def test_aes_ecb_roundtrip(n):
    key = randbytes(16)
    pt = randbytes(n)

    ct = AES.ecb_encrypt(pt, key)
    assert len(ct) % 16 == 0
    assert len(ct) > n
    assert AES.ecb_decrypt(ct, key) == pt


@pytest.mark.parametrize("n", LENGTHS)
def test_aes_ecb_mode_object_roundtrip(n):
    key = randbytes(16)
    pt = randbytes(n)

    cipher = AES.new(key, AES.MODE_ECB)
    assert cipher.decrypt(cipher.encrypt(pt)) == pt


def test_aes_ecb_identical_blocks_give_identical_ciphertext():
    key = randbytes(16)
    block = randbytes(16)

    ct = AES.ecb_encrypt(block * 3, key)
    assert ct[:16] == ct[16:32] == ct[32:48]


def test_aes_ecb_repeated_calls_are_independent():
    key = randbytes(16)
    pt = randbytes(40)

    cipher = AES.new(key, AES.MODE_ECB)
    assert cipher.encrypt(pt) == cipher.encrypt(pt)


# ===========================================================
# Padding only a short final block
# ===========================================================


def test_aes_ecb_short_tail_padding_leaves_aligned_input_unpadded():
    key = randbytes(16)
    pt = randbytes(32)

    ct = AES.ecb_encrypt(pt, key, always_pad=False)
    assert ct == RefAES.new(key, RefAES.MODE_ECB).encrypt(pt)
    assert AES.ecb_decrypt(ct, key, remove_padding=False, always_pad=False) == pt


@pytest.mark.parametrize("n", [1, 15, 17, 33])
def test_aes_ecb_short_tail_padding_roundtrip(n):
    key = randbytes(16)
    pt = randbytes(n)

    ct = AES.ecb_encrypt(pt, key, always_pad=False)
    assert len(ct) == (n + 15) // 16 * 16
    assert AES.ecb_decrypt(ct, key, always_pad=False) == pt


def test_aes_ecb_short_tail_padding_empty_input():
    key = randbytes(16)
    assert AES.ecb_encrypt(b"", key, always_pad=False) == b""
    assert AES.ecb_decrypt(b"", key, always_pad=False) == b""


# ===========================================================
# Validation
# ===========================================================


def test_aes_ecb_rejects_bad_key_size():
    with pytest.raises(ContractViolation):
        AES.new(b"", AES.MODE_ECB)
    with pytest.raises(ContractViolation):
        AES.new(b"\x00" * 15, AES.MODE_ECB)
    with pytest.raises(ContractViolation):
        AES.new(b"\x00" * 32, AES.MODE_ECB)


def test_aes_rejects_unknown_mode():
    with pytest.raises(ContractViolation):
        AES.new(b"\x00" * 16, 99)


def test_aes_ecb_rejects_non_block_aligned_ciphertext():
    key = randbytes(16)
    with pytest.raises(ContractViolation):
        AES.ecb_decrypt(b"\x00" * 15, key)
    with pytest.raises(ContractViolation):
        AES.ecb_decrypt(b"\x00" * 31, key, remove_padding=False)


def test_aes_ecb_rejects_empty_ciphertext_with_canonical_padding():
    with pytest.raises(InvalidPadding):
        AES.ecb_decrypt(b"", randbytes(16))


def test_aes_ecb_detects_bad_padding():
    key = randbytes(16)
    # final block decrypts to a trailer of 0x00
    ct = RefAES.new(key, RefAES.MODE_ECB).encrypt(b"A" * 15 + b"\x00")
    with pytest.raises(InvalidPadding):
        AES.ecb_decrypt(ct, key)
