"""
User Interface module.

This package contains UI implementations for displaying tracker results.
Currently implements terminal/console output.
"""

from .terminal import TerminalDisplay, category_title, format_credits

__all__ = ["TerminalDisplay", "category_title", "format_credits"]
