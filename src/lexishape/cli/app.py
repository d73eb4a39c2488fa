"""Main CLI application wiring for Lexishape.

  lexishape inflect child --op pluralize
  lexishape clause "He likes pizza" --question
  lexishape conjugate go --person 3 --tense past --aspect perfect
  lexishape override set plural octopus octopuses
"""

import logging
from typing import Optional

import typer

from lexishape.config import VALID_LOG_LEVELS, ConfigError, load_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

app = typer.Typer(add_completion=False, help="Lexishape: shape words and short clauses")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING, ERROR (default: config.yml)"
    ),
):
    """Lexishape CLI."""
    if log_level is None:
        try:
            log_level = load_config().log_level
        except ConfigError:
            # Reported by the command that needs the config
            log_level = "WARNING"
    level = log_level.upper()
    if level not in VALID_LOG_LEVELS:
        print(f"Invalid log level: {log_level}")
        raise typer.Exit(1)
    logging.basicConfig(level=level, format=LOG_FORMAT)


# =============================================================================
# Subcommand groups
# =============================================================================

override_app = typer.Typer(help="Manage per-language overrides")
app.add_typer(override_app, name="override")
app.add_typer(override_app, name="overrides")

from lexishape.cli import override as override_cmd

override_cmd.register(override_app)


# =============================================================================
# Top-level commands
# =============================================================================

from lexishape.cli import article as article_cmd
from lexishape.cli import clause as clause_cmd
from lexishape.cli import conjugate as conjugate_cmd
from lexishape.cli import inflect as inflect_cmd
from lexishape.cli import init as init_cmd
from lexishape.cli import pronouns as pronouns_cmd

init_cmd.register(app)
inflect_cmd.register(app)
clause_cmd.register(app)
conjugate_cmd.register(app)
article_cmd.register(app)
pronouns_cmd.register(app)
