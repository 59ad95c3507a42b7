"""Command-line interface."""

from morse_translator.cli.app import create_app

__all__ = ["create_app"]
