"""Package-wide logging setup for faulttree.

All modules obtain their logger through ``get_logger(__name__)``. Loggers are
children of the ``faulttree`` logger, which owns the only handler. The initial
level can be set with the ``FAULTTREE_LOG_LEVEL`` environment variable
(e.g. ``DEBUG``); it defaults to WARNING so that library users are not flooded
by construction messages.
"""

import logging
import os
import sys
from typing import Optional, Union

from faulttree.errors import SettingsError

ROOT_LOGGER_NAME = "faulttree"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LEVEL_ENV_VAR = "FAULTTREE_LOG_LEVEL"

_configured = False


def _resolve_level(level: Union[int, str]) -> int:
    """Translate a level name (``"debug"``) or number (``"10"``) into its value.

    Raises:
        SettingsError: The level is not recognized.
    """
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    numeric = logging.getLevelName(text.upper())
    if not isinstance(numeric, int):
        raise SettingsError(f"Unknown log level '{level}'")
    return numeric


def setup_root_logger(
    level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``faulttree`` logger.

    Repeated calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Logging level or level name. Falls back to the
            ``FAULTTREE_LOG_LEVEL`` environment variable, then WARNING.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _configured

    if _configured:
        return

    rejected_env_level = None
    if level is None:
        env_level = os.environ.get(LEVEL_ENV_VAR)
        try:
            numeric = _resolve_level(env_level) if env_level else logging.WARNING
        except SettingsError:
            rejected_env_level = env_level
            numeric = logging.WARNING
    else:
        numeric = _resolve_level(level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so that pytest's caplog sees package records.
    root_logger.propagate = True

    _configured = True

    if rejected_env_level is not None:
        root_logger.warning(
            "Ignoring unknown %s=%r; using WARNING", LEVEL_ENV_VAR, rejected_env_level
        )


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``faulttree`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger instance without handlers of its own.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``faulttree`` logger and its handlers.

    Args:
        level: Numeric level (``logging.DEBUG``) or level name (``"debug"``).

    Raises:
        SettingsError: The level is not recognized.
    """
    setup_root_logger()
    numeric = _resolve_level(level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


def enable_debug_logging() -> None:
    """Log model construction steps."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Drop the package handler so that the next call reconfigures it."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
