"""Logging configuration for svcman."""

import logging
from logging.handlers import RotatingFileHandler

from svcman.config import Config, get_config

_HANDLER_MARKER = "_svcman_handler"


def configure_logging(config: Config | None = None) -> None:
    """Attach a stderr handler and, when requested, a rotating file handler."""
    config = config or get_config()
    root_logger = logging.getLogger()
    if any(getattr(handler, _HANDLER_MARKER, False) for handler in root_logger.handlers):
        return

    level = logging.DEBUG if config.verbose else logging.WARNING
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                config.log_file,
                maxBytes=config.log_rotate_max_bytes,
                backupCount=config.log_rotate_backups,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        root_logger.addHandler(handler)
