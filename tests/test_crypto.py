import os

import pytest

from fenris.crypto import (
    AES_GCM_IV_SIZE,
    ECDHError,
    ECDHErrorKind,
    EncryptionError,
    EncryptionErrorKind,
    compute_ecdh_shared_secret,
    decrypt_data_aes_gcm,
    derive_key_from_shared_secret,
    encrypt_data_aes_gcm,
    generate_ecdh_keypair,
)

PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 65


def test_basic_encrypt_decrypt():
    plaintext = b"This is a secret message to encrypt"
    key = bytes(range(32))
    iv = bytes(i + 100 for i in range(12))

    ciphertext = encrypt_data_aes_gcm(plaintext, key, iv)
    assert len(ciphertext) == len(plaintext) + 16
    assert ciphertext[: len(plaintext)] != plaintext

    assert decrypt_data_aes_gcm(ciphertext, key, iv) == plaintext


def test_known_gcm_vector():
    ciphertext = encrypt_data_aes_gcm(bytes(16), bytes(16), bytes(12))
    assert ciphertext.hex() == (
        "0388dace60b6a392f328c2b971b2fe78" "ab6e47d42cec13bdf53a67b21257bddf"
    )


def test_empty_input():
    key = bytes(32)
    iv = bytes(12)
    assert encrypt_data_aes_gcm(b"", key, iv) == b""
    assert decrypt_data_aes_gcm(b"", key, iv) == b""


def test_invalid_key_size():
    plaintext = b"Test message"
    invalid_key = bytes(20)
    iv = bytes(12)

    with pytest.raises(EncryptionError) as info:
        encrypt_data_aes_gcm(plaintext, invalid_key, iv)
    assert info.value.kind is EncryptionErrorKind.INVALID_KEY_SIZE

    valid_ciphertext = encrypt_data_aes_gcm(plaintext, bytes(32), iv)
    with pytest.raises(EncryptionError) as info:
        decrypt_data_aes_gcm(valid_ciphertext, invalid_key, iv)
    assert info.value.kind is EncryptionErrorKind.INVALID_KEY_SIZE


def test_invalid_iv_size():
    plaintext = b"Test message"
    key = bytes(32)
    invalid_iv = bytes(16)

    with pytest.raises(EncryptionError) as info:
        encrypt_data_aes_gcm(plaintext, key, invalid_iv)
    assert info.value.kind is EncryptionErrorKind.INVALID_IV_SIZE

    valid_ciphertext = encrypt_data_aes_gcm(plaintext, key, bytes(12))
    with pytest.raises(EncryptionError) as info:
        decrypt_data_aes_gcm(valid_ciphertext, key, invalid_iv)
    assert info.value.kind is EncryptionErrorKind.INVALID_IV_SIZE


def test_ciphertext_shorter_than_tag():
    with pytest.raises(EncryptionError) as info:
        decrypt_data_aes_gcm(bytes(10), bytes(32), bytes(12))
    assert info.value.kind is EncryptionErrorKind.INVALID_DATA


def test_tampered_ciphertext():
    plaintext = b"This is a test message for integrity check"
    key = bytes(32)
    iv = bytes(12)
    ciphertext = bytearray(encrypt_data_aes_gcm(plaintext, key, iv))
    ciphertext[len(ciphertext) // 2] ^= 0x01

    with pytest.raises(EncryptionError) as info:
        decrypt_data_aes_gcm(bytes(ciphertext), key, iv)
    assert info.value.kind is EncryptionErrorKind.DECRYPTION_FAILED


def test_large_data():
    data = os.urandom(1024 * 1024)
    key = os.urandom(32)
    iv = os.urandom(12)
    ciphertext = encrypt_data_aes_gcm(data, key, iv)
    decrypted = decrypt_data_aes_gcm(ciphertext, key, iv)
    assert len(decrypted) == len(data)
    assert decrypted == data


@pytest.mark.parametrize("key", [bytes([1]) * 16, bytes([2]) * 24, bytes([3]) * 32])
def test_different_key_sizes(key):
    plaintext = b"Testing different key sizes"
    iv = bytes(12)
    ciphertext = encrypt_data_aes_gcm(plaintext, key, iv)
    assert decrypt_data_aes_gcm(ciphertext, key, iv) == plaintext


def test_key_pair_generation():
    private_key, public_key = generate_ecdh_keypair()
    assert len(private_key) == PRIVATE_KEY_SIZE
    assert len(public_key) == PUBLIC_KEY_SIZE
    assert public_key[0] == 0x04


def test_shared_secret_computation():
    alice_private, alice_public = generate_ecdh_keypair()
    bob_private, bob_public = generate_ecdh_keypair()

    alice_shared = compute_ecdh_shared_secret(alice_private, bob_public)
    bob_shared = compute_ecdh_shared_secret(bob_private, alice_public)

    assert len(alice_shared) == 32
    assert alice_shared == bob_shared


def test_shared_secret_with_invalid_public_key():
    private_key, _ = generate_ecdh_keypair()
    with pytest.raises(ECDHError) as info:
        compute_ecdh_shared_secret(private_key, b"\x04" + bytes(64))
    assert info.value.kind is ECDHErrorKind.SHARED_SECRET_FAILED


def test_key_derivation():
    private_key, public_key = generate_ecdh_keypair()
    shared_secret = compute_ecdh_shared_secret(private_key, public_key)

    key = derive_key_from_shared_secret(shared_secret, 32)
    assert len(key) == 32

    key128 = derive_key_from_shared_secret(shared_secret, 16)
    assert len(key128) == 16

    key_with_context = derive_key_from_shared_secret(shared_secret, 32, b"test")
    assert len(key_with_context) == 32
    assert key != key_with_context


def test_key_derivation_is_deterministic():
    shared_secret = bytes(range(32))
    assert derive_key_from_shared_secret(shared_secret) == derive_key_from_shared_secret(
        shared_secret, 32, b""
    )


def test_key_derivation_invalid_size():
    with pytest.raises(ECDHError) as info:
        derive_key_from_shared_secret(bytes(32), 20)
    assert info.value.kind is ECDHErrorKind.INVALID_KEY_SIZE


def test_complete_flow():
    message = b"This is a secret message for ECDH testing"

    alice_private, alice_public = generate_ecdh_keypair()
    bob_private, bob_public = generate_ecdh_keypair()

    alice_shared = compute_ecdh_shared_secret(alice_private, bob_public)
    alice_key = derive_key_from_shared_secret(alice_shared, 32)

    iv = os.urandom(AES_GCM_IV_SIZE)
    ciphertext = encrypt_data_aes_gcm(message, alice_key, iv)
    assert len(ciphertext) > 0
    assert ciphertext[: len(message)] != message

    bob_shared = compute_ecdh_shared_secret(bob_private, alice_public)
    bob_key = derive_key_from_shared_secret(bob_shared, 32)
    assert alice_key == bob_key

    decrypted = decrypt_data_aes_gcm(ciphertext, bob_key, iv)
    assert len(decrypted) == len(message)
    assert decrypted == message