"""
Logging setup for tsorganizer.

Console output goes to stderr so stdout stays clean for JSON reports. Environment:
- TSORGANIZER_MACHINE_MODE=1: no console sink (the CLI default output mode)
- TSORGANIZER_FILE_LOGGING=1: also write tsorganizer.log under TSORGANIZER_LOG_DIR
  (default ./.tsorganizer/logs)
"""

import os
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)

_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None, force=False):
    """
    Configure the loguru sinks.

    Args:
        level: Console level
        suppress_console: Drop the console sink; None reads TSORGANIZER_MACHINE_MODE
        enable_file_logging: Add the file sink; None reads TSORGANIZER_FILE_LOGGING
        force: Replace an earlier configuration (the CLI reconfigures per invocation)
    """
    global _configured

    if _configured and not force:
        return
    _configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = _env_flag("TSORGANIZER_MACHINE_MODE")
    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging is None:
        enable_file_logging = _env_flag("TSORGANIZER_FILE_LOGGING")
    if enable_file_logging:
        log_dir = Path(os.getenv("TSORGANIZER_LOG_DIR", Path.cwd() / ".tsorganizer" / "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        # One file per workspace; organize runs are short so a day of history is enough
        logger.add(
            log_dir / "tsorganizer.log",
            level="INFO",
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
        )


setup_logging()
