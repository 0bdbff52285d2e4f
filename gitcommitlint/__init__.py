"""Lint commit messages against configurable policy rules."""

__version__ = "0.3.0"
