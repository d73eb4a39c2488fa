"""Conjugation command: lexishape conjugate <lemma> [grammatical options]"""

from __future__ import annotations

import sys
from typing import Optional

import typer

from lexishape.cli.common import open_engine
from lexishape.linguistics.types import (
    Aspect,
    ConjugationRequest,
    Number,
    Person,
    Tense,
    Voice,
)

_PERSONS = {1: Person.FIRST, 2: Person.SECOND, 3: Person.THIRD}


def register(app: typer.Typer) -> None:
    @app.command()
    def conjugate(
        lemma: str = typer.Argument(help="Base form of the verb"),
        person: int = typer.Option(3, "--person", min=1, max=3, help="1, 2 or 3"),
        number: Number = typer.Option(Number.SINGULAR, "--number"),
        tense: Tense = typer.Option(Tense.PRESENT, "--tense"),
        aspect: Aspect = typer.Option(Aspect.SIMPLE, "--aspect"),
        voice: Voice = typer.Option(Voice.ACTIVE, "--voice"),
        lang: Optional[str] = typer.Option(None, "--lang", help="Language tag (default: config)"),
    ) -> None:
        """Conjugate a verb for person, number, tense, aspect and voice."""
        try:
            engine = open_engine(lang)
        except RuntimeError as e:
            print(str(e))
            sys.exit(1)

        request = ConjugationRequest(
            lemma=lemma,
            person=_PERSONS[person],
            number=number,
            tense=tense,
            aspect=aspect,
            voice=voice,
        )
        print(engine.conjugate_request(request))
