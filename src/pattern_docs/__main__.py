"""Allow ``python -m pattern_docs``."""

from pattern_docs.cli.main import app

if __name__ == "__main__":
    app()
