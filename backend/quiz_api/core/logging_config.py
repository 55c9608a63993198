"""
Logging for the quiz API.

``setup_logging`` installs a ``dictConfig`` built by ``build_config``:
one formatter, a console handler, an optional file handler, and
quieter defaults for SQLAlchemy's engine logger and uvicorn's access
log.  Nothing happens when the root logger already has handlers, so
repeated ``create_app`` calls (tests, reloads) do not stack output.
"""

import logging
import logging.config
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# loggers that flood the console at INFO
_NOISY_LOGGERS = {
    "sqlalchemy.engine": "WARNING",
    "uvicorn.access": "WARNING",
}


def _level_name(level: str) -> str:
    name = level.upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def build_config(level: str = "INFO", logfile: str | None = None) -> dict:
    handlers: dict[str, dict] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "loggers": {name: {"level": lvl} for name, lvl in _NOISY_LOGGERS.items()},
        "root": {"level": _level_name(level), "handlers": list(handlers)},
    }


def setup_logging(level: str = "INFO", logfile: str | None = None) -> None:
    if logging.getLogger().handlers:
        return
    logging.config.dictConfig(build_config(level, logfile))
