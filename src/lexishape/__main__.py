"""
Lexishape CLI entrypoint.

Executed via:
  python -m lexishape
"""

from lexishape.cli.app import app

if __name__ == "__main__":
    app()
