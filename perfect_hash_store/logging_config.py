# ==================================================
# perfect_hash_store/logging_config.py
# ==================================================
import logging
from typing import Optional

PACKAGE_LOGGER = "perfect_hash_store"

def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package's log records to the console (and optionally a file).

    Only the ``perfect_hash_store`` logger is touched; handlers an application
    installed on the root logger stay as they are.  Calling this again
    replaces the handlers added by the previous call.

    Args:
        level: Logging level for the package (e.g., logging.DEBUG).
        log_file: Optional path to a file for logging output.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, "_phs_owned", False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._phs_owned = True
        logger.addHandler(handler)

    # records are already printed here; don't repeat them through root
    logger.propagate = False
    return logger
