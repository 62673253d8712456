"""Cooperative minesweeper board logic and a small entity-component toolkit."""

__version__ = "0.1.0"