"""
Knitter: the mutable-by-replacement state of a pattern run and the primitive
stitch operations that advance it.
"""

from .operations import StitchOp, execute_op, plain_stitch, reverse_stitch
from .state import Knitter, cast_on, initialize

__all__ = [
    # State
    "Knitter",
    "cast_on",
    "initialize",
    # Operations
    "StitchOp",
    "execute_op",
    "plain_stitch",
    "reverse_stitch",
]
