"""Command-line interface for arcpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Boolean operations and offsetting printed as SVG path data
- Path measurements as a table
- SVG rendering of several paths
- Optional log file and debug geometry snapshots
"""

from arcpath.cli.app import app, cli

__all__ = ["app", "cli"]
