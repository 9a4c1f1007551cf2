"""
Schema definitions for knitgraph data contracts.

Provides the stitch, fabric, and working-fabric structures shared by the
needles, the knitter, and the resolver.
"""

from .stitch import Direction, Fabric, Offset, Stitch, StitchID, flip_direction
from .working import WorkingEntry, WorkingFabric

__all__ = [
    # stitch
    "Direction",
    "flip_direction",
    "Stitch",
    "StitchID",
    "Offset",
    "Fabric",
    # working
    "WorkingEntry",
    "WorkingFabric",
]
