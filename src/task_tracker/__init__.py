"""Command-line task list manager backed by a local JSON file."""

__version__ = "1.0.0"
