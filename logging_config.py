"""
Logging configuration for drive-folders-mcp.

Simple setup that adapters and tools can import.
validation.py should NOT log (pure functions).
"""

import logging
import sys

# Create logger for the package
logger = logging.getLogger("drive_mcp")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for drive-folders-mcp.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logger.setLevel(getattr(logging, level.upper()))

    # Only add handler if not already configured
    if not logger.handlers:
        # stderr: stdout is the MCP stdio channel
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


# NOTE: Call configure_logging() explicitly in server.py, cli.py or test setup.
# We don't auto-configure to avoid side effects on import.


def log_api_call(method: str, **params: object) -> None:
    """Log a Drive API call with key parameters."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.debug(f"API: drive.{method}({param_str})")


def log_api_result(method: str, result_count: int | None = None) -> None:
    """Log Drive API result summary."""
    if result_count is not None:
        logger.debug(f"API: drive.{method} returned {result_count} results")
    else:
        logger.debug(f"API: drive.{method} completed")
