"""Runtime configuration for svcman.

There is no config file; the values come from the global CLI options.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    verbose: bool = False
    log_file: Path | None = None
    command_timeout: float | None = None
    log_rotate_max_bytes: int = 1024 * 1024
    log_rotate_backups: int = 3


_config = Config()


def get_config() -> Config:
    return _config


def set_config(config: Config) -> None:
    global _config
    _config = config
