"""Utilities module for the League tracker.

This module provides the stat formatters and console output helpers.
"""

from .formatters import OutputFormatter, format_kda, format_rank, format_win_rate

__all__ = ['OutputFormatter', 'format_kda', 'format_rank', 'format_win_rate']
