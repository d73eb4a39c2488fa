"""Article command: pick a determiner for a noun phrase."""

from __future__ import annotations

import sys
from typing import Optional

import typer

from lexishape.cli.common import open_engine
from lexishape.linguistics.types import DeterminerPreference


def register(app: typer.Typer) -> None:
    @app.command()
    def article(
        phrase: str = typer.Argument(help="Noun phrase"),
        definite: bool = typer.Option(False, "--definite", help="Definite article"),
        indefinite: bool = typer.Option(False, "--indefinite", help="Indefinite article (default)"),
        none: bool = typer.Option(False, "--none", help="No article"),
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Print the noun phrase with its determiner."""
        if sum([definite, indefinite, none]) > 1:
            print("Error: --definite, --indefinite and --none are mutually exclusive.")
            raise typer.Exit(1)

        if definite:
            preference = DeterminerPreference.DEFINITE
        elif none:
            preference = DeterminerPreference.NONE
        else:
            preference = DeterminerPreference.INDEFINITE

        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        determiner = engine.determiner(phrase, preference)
        print(f"{determiner} {phrase}".strip())
