"""zlib-based compression and decompression of byte strings."""

from __future__ import annotations

import enum
import zlib

__all__ = [
    "CompressionErrorKind",
    "CompressionError",
    "compress_data",
    "decompress_data",
]


class CompressionErrorKind(enum.Enum):
    """Reasons a compression or decompression can fail."""

    INVALID_LEVEL = enum.auto()
    COMPRESSION_FAILED = enum.auto()
    DECOMPRESSION_FAILED = enum.auto()
    BUFFER_TOO_SMALL = enum.auto()
    INVALID_DATA = enum.auto()


class CompressionError(Exception):
    """Raised when data cannot be compressed or decompressed."""

    def __init__(self, kind: CompressionErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.name.lower().replace("_", " "))
        self.kind = kind


def compress_data(data: bytes, level: int = 6) -> bytes:
    """Compress ``data`` into a zlib stream at ``level`` (0-9).

    Empty input gives empty output.
    """
    if not data:
        return b""
    if not 0 <= level <= 9:
        raise CompressionError(
            CompressionErrorKind.INVALID_LEVEL,
            f"compression level must be between 0 and 9, got {level}",
        )
    try:
        return zlib.compress(bytes(data), level)
    except zlib.error as exc:
        raise CompressionError(CompressionErrorKind.COMPRESSION_FAILED, str(exc)) from exc


def decompress_data(data: bytes, original_size: int) -> bytes:
    """Decompress a zlib stream whose output must fit in ``original_size`` bytes.

    Empty input gives empty output. Raises ``CompressionError`` with
    ``BUFFER_TOO_SMALL`` when the output would exceed ``original_size`` and
    ``INVALID_DATA`` when the stream is corrupt or truncated.
    """
    if not data:
        return b""
    if original_size < 0:
        raise CompressionError(
            CompressionErrorKind.BUFFER_TOO_SMALL,
            f"original size must not be negative, got {original_size}",
        )

    decompressor = zlib.decompressobj()
    try:
        # Ask for one byte more than allowed to detect overflow.
        output = decompressor.decompress(bytes(data), original_size + 1)
    except zlib.error as exc:
        raise CompressionError(CompressionErrorKind.INVALID_DATA, str(exc)) from exc

    if len(output) > original_size:
        raise CompressionError(
            CompressionErrorKind.BUFFER_TOO_SMALL,
            f"decompressed data exceeds {original_size} bytes",
        )
    if decompressor.eof:
        return output
    if len(output) < original_size:
        raise CompressionError(
            CompressionErrorKind.INVALID_DATA, "compressed stream is incomplete"
        )
    # Output buffer is full but the stream has not ended.
    raise CompressionError(
        CompressionErrorKind.BUFFER_TOO_SMALL,
        f"decompressed data does not fit in {original_size} bytes",
    )