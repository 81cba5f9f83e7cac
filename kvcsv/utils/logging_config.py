# kvcsv/utils/logging_config.py

"""
Configures logging for the kvcsv command-line tool based on loaded settings.
Uses Rich for console logging.

Library code only creates module loggers; handlers are installed here and
nowhere else.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from kvcsv.config import KvcsvConfig
from kvcsv.version import __version__

# --- Constants ---
# Map verbosity levels (from CLI flags) to logging levels
VERBOSITY_MAP = {
    1: logging.INFO,     # -v (verbose)
    2: logging.DEBUG,    # -vv (debug)
    -1: logging.CRITICAL + 10 # -q (quiet/silent) - use a level higher than critical
}

PACKAGE_LOGGER = "kvcsv"

# --- Setup Function ---

def resolve_console_level(config: KvcsvConfig, verbosity: int = 0) -> int:
    """
    Console level for a verbosity flag value; 0 defers to the configured level.
    Values above 2 are treated as 2.
    """
    if verbosity == 0:
        return logging.getLevelName(config.logging.log_level_console)
    return VERBOSITY_MAP[max(-1, min(verbosity, 2))]


def setup_logging(config: KvcsvConfig, verbosity: int = 0, console: Optional[Console] = None) -> logging.Logger:
    """
    Configures the package logger based on the provided configuration and verbosity level.

    Args:
        config: The loaded KvcsvConfig object.
        verbosity: Console verbosity (0 normal, 1 verbose, 2 debug, -1 quiet).
        console: Rich console for log output; defaults to one writing to stderr.

    Returns:
        The configured ``kvcsv`` logger.
    """
    log_cfg = config.logging
    console_level = resolve_console_level(config, verbosity)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)  # Handlers filter by their own levels
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # --- Console Handler (Rich) ---
    if console_level <= logging.CRITICAL:
        console_handler = RichHandler(
            level=console_level,
            console=console or Console(stderr=True),
            show_time=False,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(console_handler)

    # --- File Handler ---
    if log_cfg.log_file_enabled:
        log_path = log_cfg.log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(log_cfg.log_level_file)
        file_handler.setFormatter(logging.Formatter(log_cfg.log_format))
        package_logger.addHandler(file_handler)

    init_logger = logging.getLogger(f"{PACKAGE_LOGGER}.init")
    init_logger.debug(f"kvcsv v{__version__} logging initialized (console level {logging.getLevelName(console_level)}).")
    if log_cfg.log_file_enabled:
        init_logger.info(f"Logging to file: {log_cfg.log_file}")

    return package_logger
