"""
knitgraph: a combinatorial simulator of knitted fabric construction.

Stitches are made by drawing new loops through live loops held on needles.
The result of a run is a Fabric: every stitch in creation order, each
referring to its predecessors by backward offset.
"""

from .knitter import (
    Knitter,
    StitchOp,
    cast_on,
    execute_op,
    initialize,
    plain_stitch,
    reverse_stitch,
)
from .needles import (
    CircularNeedles,
    NeedlesExhaustedError,
    NeedleStyle,
    TwoNeedles,
    empty_needles,
)
from .pattern import (
    Pattern,
    PatternError,
    PatternResult,
    demo_fabric,
    knit_fabric,
    repeat,
    run_pattern,
    simulate_pattern,
)
from .resolver import ResolutionError, resolve
from .schemas import Direction, Fabric, Offset, Stitch, StitchID, WorkingFabric, flip_direction

__all__ = [
    # Data model
    "Direction",
    "flip_direction",
    "Stitch",
    "StitchID",
    "Offset",
    "Fabric",
    "WorkingFabric",
    # Needles
    "NeedleStyle",
    "TwoNeedles",
    "CircularNeedles",
    "empty_needles",
    "NeedlesExhaustedError",
    # Knitter
    "Knitter",
    "cast_on",
    "initialize",
    "StitchOp",
    "execute_op",
    "plain_stitch",
    "reverse_stitch",
    # Resolution
    "resolve",
    "ResolutionError",
    # Patterns
    "Pattern",
    "PatternError",
    "PatternResult",
    "repeat",
    "run_pattern",
    "knit_fabric",
    "simulate_pattern",
    "demo_fabric",
]
