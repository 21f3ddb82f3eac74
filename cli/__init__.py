"""Console layer - controller and demonstration entry point."""

from cli.controller import ElectionController

__all__ = [
    "ElectionController",
]
