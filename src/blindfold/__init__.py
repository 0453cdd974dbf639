"""Blindfold — custom chess game recorder and replay toolkit."""

__version__ = "0.1.0"
