"""Allow running as ``python -m ric``."""

from ric.cli.main import app

if __name__ == "__main__":
    app()
