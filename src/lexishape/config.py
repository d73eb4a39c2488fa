"""Lexishape configuration.

Layout:
    $LEXISHAPE_HOME (default ~/.lexishape)/
        config.yml      language, log level, store settings
        overrides.db    SQLite override store (default backend)

A missing config.yml means defaults. The CLI's `init` command writes one.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

VALID_BACKENDS = {"sqlite", "memory"}
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(RuntimeError):
    """Raised when config.yml exists but cannot be used."""


@dataclass(frozen=True)
class Config:
    home: Path
    language: str = "en"
    log_level: str = "WARNING"
    store_backend: str = "sqlite"
    store_path: Path | None = None

    @property
    def config_path(self) -> Path:
        return self.home / "config.yml"

    @property
    def resolved_store_path(self) -> Path:
        return self.store_path or self.home / "overrides.db"

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "log_level": self.log_level,
            "store": {
                "backend": self.store_backend,
                "path": str(self.resolved_store_path),
            },
        }


def lexishape_home() -> Path:
    env = os.environ.get("LEXISHAPE_HOME")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".lexishape"


def load_config(home: Path | None = None) -> Config:
    home = (home or lexishape_home()).expanduser()
    cfg_path = home / "config.yml"
    if not cfg_path.exists():
        return Config(home=home)

    try:
        raw = yaml.safe_load(cfg_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config ({cfg_path}): {e}") from e

    if raw is None:
        return Config(home=home)
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid config ({cfg_path}): expected a mapping")

    store = raw.get("store") or {}
    if not isinstance(store, dict):
        raise ConfigError(f"Invalid config ({cfg_path}): 'store' must be a mapping")

    backend = str(store.get("backend", "sqlite"))
    if backend not in VALID_BACKENDS:
        raise ConfigError(f"Unknown store backend: {backend} (must be 'sqlite' or 'memory')")

    log_level = str(raw.get("log_level", "WARNING")).upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {log_level}")

    store_path = store.get("path")
    return Config(
        home=home,
        language=str(raw.get("language", "en")),
        log_level=log_level,
        store_backend=backend,
        store_path=Path(store_path).expanduser() if store_path else None,
    )


def write_config(cfg: Config) -> Path:
    cfg.home.mkdir(parents=True, exist_ok=True)
    with cfg.config_path.open("w") as f:
        yaml.safe_dump(cfg.to_dict(), f)
    return cfg.config_path
