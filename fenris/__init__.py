"""Compression, AES-GCM encryption, ECDH key exchange, file operations and logging for file transfer."""

__version__ = "0.1.0"