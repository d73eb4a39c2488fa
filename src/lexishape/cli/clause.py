"""Clause command: negate or question a short clause.

  lexishape clause "She is here" --negate --contracted
  lexishape clause "He likes pizza" --question
  lexishape clause "you live" --wh where
"""

from __future__ import annotations

import sys
from typing import Optional

import typer

from lexishape.cli.common import open_engine


def register(app: typer.Typer) -> None:
    @app.command()
    def clause(
        text: str = typer.Argument(help="Short clause"),
        negate: bool = typer.Option(False, "--negate", help="Negate the clause"),
        contracted: bool = typer.Option(False, "--contracted", help="Use n't (with --negate)"),
        question: bool = typer.Option(False, "--question", help="Make a yes/no question"),
        wh: Optional[str] = typer.Option(None, "--wh", help="Make a wh-question"),
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Negate a clause or turn it into a question."""
        chosen = sum([negate, question, wh is not None])
        if chosen != 1:
            print("Error: pass exactly one of --negate, --question, --wh.")
            raise typer.Exit(1)
        if contracted and not negate:
            print("Error: --contracted only applies to --negate.")
            raise typer.Exit(1)

        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        if negate:
            print(engine.negate_text(text, contracted=contracted))
        elif question:
            print(engine.make_yes_no_question_text(text))
        else:
            print(engine.make_wh_question_text(text, wh))
