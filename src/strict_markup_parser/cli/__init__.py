"""Command-line interface module for strict markup parsing.

This module provides the strict-markup tool for parsing and checking markup
files from the shell.
"""

from .main import main

__all__ = ["main"]
