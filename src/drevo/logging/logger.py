"""
Logging setup for the drevo record store.

Every module asks for ``get_logger("<module>")`` and receives a child of the
``drevo`` logger. The first call wires the ``drevo`` logger from the
``logging`` section of ``config/drevo.yml``:

* ``logs/drevo.log`` collects every record from every module;
* each module additionally writes ``logs/drevo_<module>.log``;
* stderr only shows warnings, so CLI tables and JSON stay clean
  (``debug: true`` lowers both file and stderr output to DEBUG).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from drevo.config import PROJECT_ROOT, get_config

BASE_LOGGER_NAME = "drevo"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(slots=True)
class LogSettings:
    directory: Path
    master_file: str
    level: int
    stderr_level: int
    rotate: bool


_settings: LogSettings | None = None


def _read_settings() -> LogSettings:
    cfg = get_config()
    section = cfg.logging

    directory = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not directory.is_absolute():
        directory = PROJECT_ROOT / directory

    level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
    if cfg.debug:
        level = logging.DEBUG

    return LogSettings(
        directory=directory,
        master_file=section.get("file", "drevo.log"),
        level=level,
        stderr_level=logging.DEBUG if cfg.debug else logging.WARNING,
        rotate=bool(section.get("rotate", False)),
    )


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    path = settings.directory / filename
    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _setup() -> LogSettings:
    global _settings
    if _settings is not None:
        return _settings

    settings = _read_settings()
    settings.directory.mkdir(parents=True, exist_ok=True)

    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False
    base.addHandler(_file_handler(settings, settings.master_file))

    stderr = logging.StreamHandler()
    stderr.setLevel(settings.stderr_level)
    stderr.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(stderr)

    _settings = settings
    return settings


def _qualify(name: str) -> str:
    if name == BASE_LOGGER_NAME or name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def module_log_filename(name: str) -> str:
    """``"store"`` -> ``"drevo_store.log"``."""
    return _qualify(name).replace(".", "_") + ".log"


def get_logger(name: str = BASE_LOGGER_NAME) -> Logger:
    """Return the ``drevo`` logger or one of its module children."""
    settings = _setup()
    logger = logging.getLogger(_qualify(name))
    if logger.name == BASE_LOGGER_NAME:
        return logger

    logger.setLevel(settings.level)
    if not any(getattr(h, "drevo_module", False) for h in logger.handlers):
        handler = _file_handler(settings, module_log_filename(logger.name))
        handler.drevo_module = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


# Shortcuts for the CLI, which logs under the base name.

def log_info(message: str, *args, **kwargs) -> None:
    get_logger().info(message, *args, **kwargs)


def log_warning(message: str, *args, **kwargs) -> None:
    get_logger().warning(message, *args, **kwargs)


def log_error(message: str, *args, **kwargs) -> None:
    get_logger().error(message, *args, **kwargs)
