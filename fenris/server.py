"""Server-side client state and the server entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from fenris.log import LoggingConfig, LogLevel, get_logger, initialize_logging

__all__ = ["ClientInfo", "main"]

LOGGER_NAME = "fenris_server"
LOG_FILE = "fenris_server.log"

_UINT32_MAX = 2**32 - 1
_UINT16_MAX = 2**16 - 1


def _check_range(field: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{field} must be between 0 and {maximum}, got {value}")


@dataclass
class ClientInfo:
    """What the server knows about a connected client."""

    client_id: int
    socket: int
    address: str
    port: int
    current_directory: str = ""

    def __post_init__(self) -> None:
        _check_range("client_id", self.client_id, _UINT32_MAX)
        _check_range("socket", self.socket, _UINT32_MAX)
        _check_range("port", self.port, _UINT16_MAX)


def main(argv: list[str] | None = None) -> int:
    """Start the server; returns the process exit status."""
    config = LoggingConfig(
        level=LogLevel.INFO,
        file_logging=True,
        log_file_path=LOG_FILE,
    )
    try:
        initialize_logging(config, LOGGER_NAME)
    except OSError as exc:
        print(f"Logging initialization failed: {exc}", file=sys.stderr)
        print("Failed to initialize logging system", file=sys.stderr)
        return 1

    logger = get_logger(LOGGER_NAME)
    logger.info("Fenris server starting up")
    logger.info("Fenris server shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())