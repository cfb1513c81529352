import sys
import os
from pathlib import Path
from loguru import logger


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None):
    """
    Configures the global logger.

    Console logging is on by default. File logging is opt-in via
    PHPSOLVER_FILE_LOGGING=1 environment variable or enable_file_logging=True.

    Calling it again reconfigures the sinks, so tests and the CLI can
    switch levels after the import-time default has been applied.

    Args:
        level: Logging level (default: INFO)
        suppress_console: If True, suppress console logging. If None, check PHPSOLVER_MACHINE_MODE env var.
        enable_file_logging: If True, enable file logging. If None, check PHPSOLVER_FILE_LOGGING env var.
    """
    logger.remove()

    if suppress_console is None:
        suppress_console = os.getenv("PHPSOLVER_MACHINE_MODE", "").lower() in ("1", "true", "yes")

    # Stream 1: Human-readable console output (only if not suppressed)
    if not suppress_console:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True
        )

    # Stream 2: File logging is OPT-IN only
    if enable_file_logging is None:
        enable_file_logging = os.getenv("PHPSOLVER_FILE_LOGGING", "").lower() in ("1", "true", "yes")

    if enable_file_logging:
        log_dir = Path.home() / ".phpsolver" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "phpsolver.log",
            level="INFO",
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
            serialize=False
        )


# Configure the logger on import (will check env var for machine mode)
setup_logging()
