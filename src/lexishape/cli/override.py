"""Override commands.

Overrides beat every computed rule for one language (all regional tags of
a language share them).

Commands:
  lexishape override set <kind> <word> <form>
  lexishape override keep <word>
  lexishape override show
  lexishape override reset
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
import yaml

from lexishape.cli.common import open_engine
from lexishape.overrides.model import MAP_FIELDS, Overrides


def register(app: typer.Typer) -> None:
    """Register override commands to the override subgroup."""

    @app.command("set")
    def override_set(
        kind: str = typer.Argument(help=f"One of: {', '.join(MAP_FIELDS)}"),
        key: str = typer.Argument(help="Word (or phrase, for article)"),
        value: str = typer.Argument(help="Form to produce"),
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Force a form for one word."""
        if kind not in MAP_FIELDS:
            print(f"Invalid override kind: {kind} (must be one of: {', '.join(MAP_FIELDS)})")
            raise typer.Exit(1)

        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        def mutate(overrides: Overrides) -> None:
            getattr(overrides, kind)[key.lower()] = value

        engine.update_overrides(mutate)
        print(f"✓ Override set ({engine.language}): {kind} {key} -> {value}")

    @app.command("keep")
    def override_keep(
        word: str = typer.Argument(help="Word to never pluralize or singularize"),
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Add a word to the do-not-change list."""
        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        engine.update_overrides(lambda o: o.do_not_change.add(word.lower()))
        print(f"✓ Keeping as written ({engine.language}): {word}")

    @app.command("show")
    def override_show(
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Print the overrides for a language as YAML."""
        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        overrides = engine.overrides()
        if overrides.is_empty():
            print(f"No overrides for {engine.language}.")
            return
        data = {k: v for k, v in overrides.to_dict().items() if v}
        print(yaml.safe_dump(data, allow_unicode=True, sort_keys=True).rstrip())

    @app.command("reset")
    def override_reset(
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Remove every override for a language."""
        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        engine.reset_overrides()
        print(f"✓ Overrides reset ({engine.language})")
