# kvcsv/cli/__init__.py

"""Command-line interface for inspecting merged kvcsv settings."""

from .main import cli

__all__ = ["cli"]
