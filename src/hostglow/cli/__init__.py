"""Command-line interface for hostglow."""
