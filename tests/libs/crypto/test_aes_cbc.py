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
# Encryption matches reference
# ===========================================================


@pytest.mark.parametrize("n", LENGTHS + [64, 100])
def test_aes_cbc_encrypt_matches_pycryptodome(n):
    key = randbytes(16)
    iv = randbytes(16)
    pt = randbytes(n)

    ref = RefAES.new(key, RefAES.MODE_CBC, iv=iv)
    assert AES.cbc_encrypt(pt, key, iv) == ref.encrypt(ref_pad(pt, 16))


# ===========================================================
# Decryption matches reference
# ===========================================================


@pytest.mark.parametrize("nblocks", [0, 1, 3, 5, 10])
def test_aes_cbc_decrypt_matches_pycryptodome(nblocks):
    key = randbytes(16)
    iv = randbytes(16)
    pt = randbytes(16 * nblocks)

    ct = RefAES.new(key, RefAES.MODE_CBC, iv=iv).encrypt(pt)
    assert AES.cbc_decrypt(ct, key, iv, remove_padding=False) == pt


# ===========================================================
# Round trips
# ===========================================================


@pytest.mark.parametrize("n", LENGTHS)
def test_aes_cbc_roundtrip(n):
    key = randbytes(16)
    iv = randbytes(16)
    pt = randbytes(n)

    ct = AES.cbc_encrypt(pt, key, iv)
    assert AES.cbc_decrypt(ct, key, iv) == pt


@pytest.mark.parametrize("n", [1, 15, 17, 33])
def test_aes_cbc_short_tail_padding_roundtrip(n):
    key = randbytes(16)
    iv = randbytes(16)
    pt = randbytes(n)

    ct = AES.cbc_encrypt(pt, key, iv, always_pad=False)
    assert len(ct) == (n + 15) // 16 * 16
    assert AES.cbc_decrypt(ct, key, iv, always_pad=False) == pt


def test_aes_cbc_short_tail_padding_aligned_input():
    key = randbytes(16)
    iv = randbytes(16)
    pt = randbytes(32)

    ct = AES.cbc_encrypt(pt, key, iv, always_pad=False)
    assert ct == RefAES.new(key, RefAES.MODE_CBC, iv=iv).encrypt(pt)
    assert AES.cbc_decrypt(ct, key, iv, remove_padding=False, always_pad=False) == pt


# ===========================================================
# Chaining behaviour
# ===========================================================


def test_aes_cbc_identical_blocks_give_different_ciphertext():
    key = randbytes(16)
    iv = randbytes(16)
    block = randbytes(16)

    ct = AES.cbc_encrypt(block * 3, key, iv)
    assert len({ct[0:16], ct[16:32], ct[32:48]}) == 3


def test_aes_cbc_calls_do_not_carry_chain_state():
    key = randbytes(16)
    iv = randbytes(16)
    pt = randbytes(48)

    cipher = AES.new(key, AES.MODE_CBC, iv=iv)
    first = cipher.encrypt(pt)
    assert cipher.encrypt(pt) == first
    assert cipher.decrypt(first) == pt
    assert cipher.decrypt(first) == pt


@pytest.mark.parametrize("block_index", [0, 1, 2])
@pytest.mark.parametrize("bit", [0, 5, 127])
def test_aes_cbc_bit_flip_propagation(block_index, bit):
    key = randbytes(16)
    iv = randbytes(16)
    pt = randbytes(16 * 4)

    ct = bytearray(AES.cbc_encrypt(pt, key, iv, always_pad=False))
    byte_pos = block_index * 16 + bit // 8
    ct[byte_pos] ^= 1 << (bit % 8)

    out = AES.cbc_decrypt(bytes(ct), key, iv, remove_padding=False, always_pad=False)

    blocks_in = [pt[i : i + 16] for i in range(0, len(pt), 16)]
    blocks_out = [out[i : i + 16] for i in range(0, len(out), 16)]

    for i, (before, after) in enumerate(zip(blocks_in, blocks_out, strict=True)):
        if i == block_index:
            assert after != before
        elif i == block_index + 1:
            diff = bytes(a ^ b for a, b in zip(before, after, strict=True))
            expected = bytearray(16)
            expected[bit // 8] = 1 << (bit % 8)
            assert diff == bytes(expected)
        else:
            assert after == before


# ===========================================================
# Bad key and IV validation
# ===========================================================


def test_aes_cbc_rejects_bad_key_size():
    with pytest.raises(ContractViolation):
        AES.new(b"", AES.MODE_CBC, iv=b"\x00" * 16)
    with pytest.raises(ContractViolation):
        AES.new(b"\x00" * 15, AES.MODE_CBC, iv=b"\x00" * 16)
    with pytest.raises(ContractViolation):
        AES.new(b"\x00" * 17, AES.MODE_CBC, iv=b"\x00" * 16)


def test_aes_cbc_rejects_bad_iv_size():
    key = b"\x00" * 16
    with pytest.raises(ContractViolation):
        AES.new(key, AES.MODE_CBC, iv=b"")
    with pytest.raises(ContractViolation):
        AES.new(key, AES.MODE_CBC, iv=b"\x00" * 15)
    with pytest.raises(ContractViolation):
        AES.new(key, AES.MODE_CBC, iv=b"\x00" * 17)


def test_aes_cbc_rejects_non_block_aligned_ciphertext():
    key = randbytes(16)
    iv = randbytes(16)
    with pytest.raises(ContractViolation):
        AES.cbc_decrypt(b"\x00" * 31, key, iv)


def test_aes_cbc_detects_bad_padding():
    key = randbytes(16)
    iv = randbytes(16)
    ct = RefAES.new(key, RefAES.MODE_CBC, iv=iv).encrypt(b"B" * 16)
    with pytest.raises(InvalidPadding):
        AES.cbc_decrypt(ct, key, iv)


# ===========================================================
# Default IV behavior
# ===========================================================


def test_aes_cbc_none_iv_defaults_to_zero_iv():
    key = randbytes(16)
    zero_iv = b"\x00" * 16
    pt = randbytes(16 * 2)

    my = AES.new(key, AES.MODE_CBC, iv=None)
    ref = RefAES.new(key, RefAES.MODE_CBC, iv=zero_iv)

    assert my.encrypt(pt) == ref.encrypt(ref_pad(pt, 16))


def test_aes_cbc_zero_iv_can_be_disallowed():
    key = randbytes(16)
    with pytest.raises(ContractViolation):
        AES.new(key, AES.MODE_CBC, iv=None, allow_zero_iv=False)

    cipher = AES.new(key, AES.MODE_CBC, iv=randbytes(16), allow_zero_iv=False)
    assert cipher.decrypt(cipher.encrypt(b"hi")) == b"hi"
