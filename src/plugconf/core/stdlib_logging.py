from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "plugconf"

_PLUGCONF_HANDLER: Optional[logging.Handler] = None
_CONFIGURED_TARGET: Optional[str] = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Logger:
    """Install a single plugconf-owned handler on the ``plugconf`` logger.

    Records go to ``log_path`` when given, otherwise to stderr. Idempotent
    per target: calling again with the same target only updates the level,
    a different target replaces the previous handler.
    """
    global _PLUGCONF_HANDLER, _CONFIGURED_TARGET

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_name(level))

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    if _PLUGCONF_HANDLER is not None and _CONFIGURED_TARGET == target:
        _PLUGCONF_HANDLER.setLevel(_level_from_name(level))
        return logger

    _remove_handler(logger)

    if log_path:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)

    _PLUGCONF_HANDLER = handler
    _CONFIGURED_TARGET = target
    return logger


def configure_logging_from_config(repo_root: Optional[Path] = None) -> logging.Logger:
    """Configure logging from the ``logging`` section of the merged config."""
    from plugconf.core.config.domains import LoggingConfig

    cfg = LoggingConfig(repo_root)
    return configure_logging(level=cfg.level, log_path=cfg.path)


def _remove_handler(logger: logging.Logger) -> None:
    global _PLUGCONF_HANDLER, _CONFIGURED_TARGET
    if _PLUGCONF_HANDLER is None:
        return
    logger.removeHandler(_PLUGCONF_HANDLER)
    _PLUGCONF_HANDLER.close()
    _PLUGCONF_HANDLER = None
    _CONFIGURED_TARGET = None


def reset_logging_for_tests() -> None:
    """Test-only: remove the plugconf handler and restore the default level."""
    logger = logging.getLogger(LOGGER_NAME)
    _remove_handler(logger)
    logger.setLevel(logging.NOTSET)


__all__ = [
    "LOGGER_NAME",
    "configure_logging",
    "configure_logging_from_config",
    "reset_logging_for_tests",
]
