"""Server configuration loaded from environment variables."""

import os
from dataclasses import dataclass

TRANSPORTS = ("stdio", "sse", "streamable-http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ServerConfig:
    """Runtime settings for the MCP server.

    Everything has a default; the server starts with no environment at all
    (stdio transport, INFO logging).
    """

    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    summary_chars: int = 500


def load_config() -> ServerConfig:
    """Construct a ServerConfig from environment variables.

    Optional environment variables (with defaults):
        DRIVE_MCP_TRANSPORT: stdio, sse or streamable-http (default: stdio).
        DRIVE_MCP_HOST: Bind address for network transports (default: 127.0.0.1).
        DRIVE_MCP_PORT: Bind port for network transports (default: 8080).
        DRIVE_MCP_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
            (case-insensitive, default: INFO).
        DRIVE_MCP_SUMMARY_CHARS: Length cap for summarize_content (default: 500).

    Returns:
        Configured ServerConfig instance.

    Raises:
        ValueError: If a variable holds a value the server can't use.
    """
    transport = os.environ.get("DRIVE_MCP_TRANSPORT", "stdio")
    if transport not in TRANSPORTS:
        raise ValueError(
            f"DRIVE_MCP_TRANSPORT must be one of {list(TRANSPORTS)}, got {transport!r}"
        )

    log_level = os.environ.get("DRIVE_MCP_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"DRIVE_MCP_LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {log_level!r}"
        )

    summary_chars = int(os.environ.get("DRIVE_MCP_SUMMARY_CHARS", "500"))
    if summary_chars <= 0:
        raise ValueError("DRIVE_MCP_SUMMARY_CHARS must be positive")

    return ServerConfig(
        transport=transport,
        host=os.environ.get("DRIVE_MCP_HOST", "127.0.0.1"),
        port=int(os.environ.get("DRIVE_MCP_PORT", "8080")),
        log_level=log_level,
        summary_chars=summary_chars,
    )
