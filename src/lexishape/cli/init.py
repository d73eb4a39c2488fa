"""
`lexishape init` command.

Policy layer:
- keeps existing settings, applies the given ones
- writes config
- creates the override store
"""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import Optional

import typer

from lexishape.config import VALID_BACKENDS, load_config, write_config
from lexishape.overrides import build_store


def register(app: typer.Typer) -> None:
    @app.command()
    def init(
        language: Optional[str] = typer.Option(None, "--language", help="Default language tag"),
        backend: Optional[str] = typer.Option(None, "--backend", help="'sqlite' or 'memory'"),
    ) -> None:
        """Write config.yml and create the override store."""
        try:
            cfg = load_config()
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        if backend is not None and backend not in VALID_BACKENDS:
            print(f"Invalid backend: {backend} (must be 'sqlite' or 'memory')")
            raise typer.Exit(1)

        cfg = replace(
            cfg,
            language=language or cfg.language,
            store_backend=backend or cfg.store_backend,
        )
        config_path = write_config(cfg)

        # First read creates the SQLite table
        build_store(cfg).get(cfg.language)

        print(f"Initialized lexishape at {cfg.home}")
        print(f"  config: {config_path}")
        if cfg.store_backend == "sqlite":
            print(f"  store:  {cfg.resolved_store_path}")
        else:
            print("  store:  memory (overrides last for one process)")
