"""AES-GCM encryption, ECDH key agreement on P-256 and HKDF key derivation."""

from __future__ import annotations

import enum

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

__all__ = [
    "AES_GCM_TAG_SIZE",
    "AES_GCM_IV_SIZE",
    "EncryptionErrorKind",
    "EncryptionError",
    "ECDHErrorKind",
    "ECDHError",
    "encrypt_data_aes_gcm",
    "decrypt_data_aes_gcm",
    "generate_ecdh_keypair",
    "compute_ecdh_shared_secret",
    "derive_key_from_shared_secret",
]

AES_GCM_TAG_SIZE = 16
AES_GCM_IV_SIZE = 12

_AES_KEY_SIZES = frozenset({16, 24, 32})
_PRIVATE_KEY_SIZE = 32
_HKDF_SALT = b"fenris-salt"
_HKDF_INFO = b"AES-Key"


class EncryptionErrorKind(enum.Enum):
    """Reasons an AES-GCM operation can fail."""

    INVALID_KEY_SIZE = enum.auto()
    INVALID_IV_SIZE = enum.auto()
    INVALID_DATA = enum.auto()
    ENCRYPTION_FAILED = enum.auto()
    DECRYPTION_FAILED = enum.auto()


class EncryptionError(Exception):
    """Raised when encryption or decryption fails."""

    def __init__(self, kind: EncryptionErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.name.lower().replace("_", " "))
        self.kind = kind


class ECDHErrorKind(enum.Enum):
    """Reasons a key exchange or key derivation can fail."""

    KEY_GENERATION_FAILED = enum.auto()
    SHARED_SECRET_FAILED = enum.auto()
    KEY_DERIVATION_FAILED = enum.auto()
    INVALID_KEY_SIZE = enum.auto()


class ECDHError(Exception):
    """Raised when key generation, agreement or derivation fails."""

    def __init__(self, kind: ECDHErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.name.lower().replace("_", " "))
        self.kind = kind


def _check_key_and_iv(key: bytes, iv: bytes) -> None:
    if len(key) not in _AES_KEY_SIZES:
        raise EncryptionError(
            EncryptionErrorKind.INVALID_KEY_SIZE,
            f"AES key must be 16, 24 or 32 bytes, got {len(key)}",
        )
    if len(iv) != AES_GCM_IV_SIZE:
        raise EncryptionError(
            EncryptionErrorKind.INVALID_IV_SIZE,
            f"GCM IV must be {AES_GCM_IV_SIZE} bytes, got {len(iv)}",
        )


def encrypt_data_aes_gcm(plaintext: bytes, key: bytes, iv: bytes) -> bytes:
    """Encrypt ``plaintext`` with AES-GCM; the tag is appended to the result.

    Empty plaintext gives empty output.
    """
    if not plaintext:
        return b""
    _check_key_and_iv(key, iv)
    try:
        return AESGCM(bytes(key)).encrypt(bytes(iv), bytes(plaintext), None)
    except (ValueError, OverflowError) as exc:
        raise EncryptionError(EncryptionErrorKind.ENCRYPTION_FAILED, str(exc)) from exc


def decrypt_data_aes_gcm(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
    """Decrypt AES-GCM ``ciphertext`` that carries its tag at the end.

    Empty ciphertext gives empty output. A failed authentication raises
    ``EncryptionError`` with ``DECRYPTION_FAILED``.
    """
    if not ciphertext:
        return b""
    _check_key_and_iv(key, iv)
    if len(ciphertext) < AES_GCM_TAG_SIZE:
        raise EncryptionError(
            EncryptionErrorKind.INVALID_DATA,
            "ciphertext is shorter than the authentication tag",
        )
    try:
        return AESGCM(bytes(key)).decrypt(bytes(iv), bytes(ciphertext), None)
    except (InvalidTag, ValueError, OverflowError) as exc:
        raise EncryptionError(
            EncryptionErrorKind.DECRYPTION_FAILED, "authentication failed"
        ) from exc


def generate_ecdh_keypair() -> tuple[bytes, bytes]:
    """Generate a P-256 key pair.

    Returns the 32-byte private scalar and the 65-byte uncompressed public point.
    """
    try:
        private_key = ec.generate_private_key(ec.SECP256R1())
        private_bytes = private_key.private_numbers().private_value.to_bytes(
            _PRIVATE_KEY_SIZE, "big"
        )
        public_bytes = private_key.public_key().public_bytes(
            serialization.Encoding.X962,
            serialization.PublicFormat.UncompressedPoint,
        )
    except (ValueError, TypeError) as exc:
        raise ECDHError(ECDHErrorKind.KEY_GENERATION_FAILED, str(exc)) from exc
    return private_bytes, public_bytes


def compute_ecdh_shared_secret(private_key: bytes, peer_public_key: bytes) -> bytes:
    """Compute the P-256 ECDH shared secret from our private key and the peer's public key."""
    try:
        if len(private_key) != _PRIVATE_KEY_SIZE:
            raise ValueError(
                f"private key must be {_PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
            )
        curve = ec.SECP256R1()
        own_key = ec.derive_private_key(int.from_bytes(bytes(private_key), "big"), curve)
        peer_key = ec.EllipticCurvePublicKey.from_encoded_point(curve, bytes(peer_public_key))
        return own_key.exchange(ec.ECDH(), peer_key)
    except (ValueError, TypeError) as exc:
        raise ECDHError(ECDHErrorKind.SHARED_SECRET_FAILED, str(exc)) from exc


def derive_key_from_shared_secret(
    shared_secret: bytes, key_size: int = 32, context: bytes = b""
) -> bytes:
    """Derive an AES key of ``key_size`` bytes from ``shared_secret`` with HKDF-SHA256.

    ``context`` is appended to the fixed info string.
    """
    if key_size not in _AES_KEY_SIZES:
        raise ECDHError(
            ECDHErrorKind.INVALID_KEY_SIZE,
            f"key size must be 16, 24 or 32 bytes, got {key_size}",
        )
    try:
        hkdf = HKDF(
            algorithm=hashes.SHA256(),
            length=key_size,
            salt=_HKDF_SALT,
            info=_HKDF_INFO + bytes(context),
        )
        return hkdf.derive(bytes(shared_secret))
    except (ValueError, TypeError) as exc:
        raise ECDHError(ECDHErrorKind.KEY_DERIVATION_FAILED, str(exc)) from exc