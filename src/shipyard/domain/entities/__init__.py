"""Runtime entity exports."""

from .module import Module

__all__ = [
    "Module",
]
