from __future__ import annotations

"""Central logging configuration for applications using confstrap.

The library itself only creates module loggers. Applications may call
:func:`setup_logging` at start-up, optionally with a ``dictConfig`` mapping
they loaded through the config manager (for example a ``YamlConfig``).
"""

import logging
import logging.config
import os
from typing import Any, Mapping, Optional

__all__ = ["setup_logging"]

LOG_LEVEL_ENV = "CONFSTRAP_LOG_LEVEL"
DEBUG_MODULES_ENV = "CONFSTRAP_DEBUG_MODULES"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: Optional[Mapping[str, Any]] = None) -> bool:
    """Configure logging from *config* or fall back to console logging.

    Returns ``True`` when *config* was applied, ``False`` when the minimal
    fallback was used.
    """
    applied = False
    if config and isinstance(config, Mapping) and config.get("version"):
        try:
            logging.config.dictConfig(dict(config))
            logging.getLogger(__name__).info("Logging initialised from config")
            applied = True
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logging.getLogger(__name__).error("Invalid logging config, using fallback: %s", exc)
    else:
        _setup_minimal_logging()

    _apply_debug_overrides()
    return applied


def _setup_minimal_logging() -> None:
    """Console-only logging at CONFSTRAP_LOG_LEVEL (default INFO)."""
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    minimal_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": _FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "level": level,
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }
    logging.config.dictConfig(minimal_config)


def _apply_debug_overrides() -> None:
    """Switch loggers named in CONFSTRAP_DEBUG_MODULES to DEBUG."""
    try:
        targets = [m.strip() for m in os.environ.get(DEBUG_MODULES_ENV, "").split(",") if m.strip()]
        for name in targets:
            logger = logging.getLogger(name)
            logger.setLevel(logging.DEBUG)
            has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
            if not has_debug_handler:
                handler = logging.StreamHandler()
                handler.setLevel(logging.DEBUG)
                handler.setFormatter(logging.Formatter(_FORMAT))
                logger.addHandler(handler)
            logger.info("Debug override active for logger '%s'", name)
    except Exception as exc:
        # Don't crash the app because of logging
        print(f"Warning: failed to apply debug overrides: {exc}")
