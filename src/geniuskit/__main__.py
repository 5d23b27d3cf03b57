"""Allow running geniuskit as ``python -m geniuskit``."""

from geniuskit.cli import app

if __name__ == "__main__":
    app()
