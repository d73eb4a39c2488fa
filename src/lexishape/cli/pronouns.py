"""Pronoun command: list case variants of a pronoun."""

from __future__ import annotations

import sys
from typing import Optional

import typer

from lexishape.cli.common import open_engine


def register(app: typer.Typer) -> None:
    @app.command()
    def pronouns(
        token: str = typer.Argument(help="Any form of the pronoun (he, him, ...)"),
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Subject, object, possessive adjective, possessive pronoun, reflexive."""
        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        print(", ".join(engine.pronoun_variants(token)))
