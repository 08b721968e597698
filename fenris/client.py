"""Client-side connection state and the client entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from fenris.log import LoggingConfig, LogLevel, get_logger, initialize_logging

__all__ = ["ServerInfo", "main"]

LOGGER_NAME = "fenris_client"
LOG_FILE = "fenris_client.log"

_UINT32_MAX = 2**32 - 1
_UINT16_MAX = 2**16 - 1


def _check_range(field: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{field} must be between 0 and {maximum}, got {value}")


@dataclass
class ServerInfo:
    """What the client knows about a server it is connected to."""

    server_id: int
    socket: int
    address: str
    port: int
    current_directory: str = ""

    def __post_init__(self) -> None:
        _check_range("server_id", self.server_id, _UINT32_MAX)
        _check_range("socket", self.socket, _UINT32_MAX)
        _check_range("port", self.port, _UINT16_MAX)


def main(argv: list[str] | None = None) -> int:
    """Start the client; returns the process exit status."""
    config = LoggingConfig(
        level=LogLevel.DEBUG,
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
    logger.info("Fenris client starting up")
    logger.info("Fenris client shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())