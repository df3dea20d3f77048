from __future__ import annotations

"""Central logging configuration for applications embedding xpathgen.

The library itself never installs handlers. Host applications may call
:func:`setup_logging` once at start-up.
"""

import logging
import logging.config
import os
from typing import Any, Dict, List

from xpathgen.config import ConfigManager

__all__ = ["setup_logging"]

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure logging from the packaged/user ``logging.yml``."""
    config_manager = ConfigManager()
    logging_config = config_manager.get_logging_config()

    if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
        try:
            logging.config.dictConfig(logging_config)
            logging.getLogger(__name__).info("===== Logging initialised from config files =====")
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logging.getLogger(__name__).error("Invalid logging config, using fallback: %s", exc)
    else:
        _setup_minimal_logging()

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up console-only logging when config is unavailable."""
    minimal_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": _FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "level": "INFO",
            },
        },
        "root": {
            "level": "INFO",
            "handlers": ["console"],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.getLogger(__name__).warning("===== Logging initialised with minimal fallback =====")


def _debug_targets() -> List[str]:
    extra_modules = os.environ.get("XPATHGEN_DEBUG_MODULES", "").strip()
    return [m.strip() for m in extra_modules.split(",") if m.strip()]


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    ``XPATHGEN_DEBUG_MODULES=comma,separated,logger,names`` sets DEBUG for the
    listed loggers, e.g. ``xpathgen.core.path_builder``.
    """
    for name in _debug_targets():
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            handler = logging.StreamHandler()
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(handler)
        logger.info("Debug override active for logger '%s'", name)
