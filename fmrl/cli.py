"""Main CLI module for fmrl.

This module re-exports the CLI for convenience. The main implementation
is in __main__.py.
"""

from fmrl.__main__ import cli

__all__ = ["cli"]
