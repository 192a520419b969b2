"""Entry point for ``python -m envref``."""

from envref.cli.main import cli

if __name__ == "__main__":
    cli()
