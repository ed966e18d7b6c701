"""Main entry point for hostglow."""

from hostglow.cli.main import cli

if __name__ == "__main__":
    cli()
