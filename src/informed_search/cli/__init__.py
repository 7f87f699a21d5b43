"""Command-line interface for informed-search.

This module provides CLI commands for searching graph files and the Romania
example map, and for inspecting the configuration.
"""

from .main import main_cli
from .commands import solve_command, romania_command, config_command
from .utils import setup_logging

__all__ = [
    'main_cli',
    'solve_command',
    'romania_command',
    'config_command',
    'setup_logging'
]
