"""
Needles: the live-stitch holders the knitter works from.

Two styles are provided: straight needles for flat work, which turn over at the
end of every row, and circular needles, which never turn.
"""

from .base import Needles, NeedlesExhaustedError, NeedleStyle
from .circular import CircularNeedles
from .registry import (
    DemoDefaults,
    NeedleRegistry,
    NeedleStyleEntry,
    RefillMode,
    empty_needles,
    get_registry,
)
from .two_sided import TwoNeedles

__all__ = [
    # Protocol and errors
    "Needles",
    "NeedleStyle",
    "NeedlesExhaustedError",
    # Implementations
    "TwoNeedles",
    "CircularNeedles",
    "empty_needles",
    # Registry
    "NeedleRegistry",
    "NeedleStyleEntry",
    "RefillMode",
    "DemoDefaults",
    "get_registry",
]
