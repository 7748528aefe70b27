"""Command-line interface tools."""

from .detect import main, run_detection

__all__ = [
    "main",
    "run_detection",
]
