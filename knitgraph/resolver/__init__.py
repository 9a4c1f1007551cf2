"""Resolver: turns identity references into backward offsets."""

from .resolve import ResolutionError, finish, resolve, walk

__all__ = [
    "resolve",
    "finish",
    "walk",
    "ResolutionError",
]
