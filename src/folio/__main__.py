"""Entry point for running Folio as a module.

Usage:
    python -m folio [command] [options]

Example:
    python -m folio render --output dist/index.html
    python -m folio themes
"""

from folio.cli import app

if __name__ == "__main__":
    app()
