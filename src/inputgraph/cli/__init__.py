"""
inputgraph CLI - Command line tools for generating input declarations.
"""

from __future__ import annotations

from .main import main, app

__all__ = ["main", "app"]
