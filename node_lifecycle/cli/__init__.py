"""CLI module for node-lifecycle."""

from .main import cli, detect_node_version, main

__all__ = [
    "cli",
    "detect_node_version",
    "main",
]
