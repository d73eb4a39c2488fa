"""Preview command: lexishape inflect <word> --op <operation> [--lang]

Applies one per-word transform. With several words the transform applies
to the last one and the rest of the text is kept as written.
"""

from __future__ import annotations

import sys
from typing import Optional

import typer

from lexishape.cli.common import open_engine
from lexishape.linguistics.types import WordOperation


def register(app: typer.Typer) -> None:
    @app.command()
    def inflect(
        text: str = typer.Argument(help="Word, or text whose last word is transformed"),
        op: WordOperation = typer.Option(..., "--op", help="Transform to apply"),
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
        conservative: bool = typer.Option(
            False, "--conservative", help="Leave proper names alone (plural/singular)"
        ),
    ) -> None:
        """Apply a word transform: plural, past tense, comparative, ..."""
        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        print(engine.apply_to_last_word(text, op, conservative=conservative))
