"""
Primitive stitch operations for the knitter.

Each operation pops one live stitch, draws a new loop through it, records the
new stitch in the working fabric, and puts the new stitch back on the needles.
The live stitch count is unchanged by every primitive.

Plain and reverse stitches differ only in direction: a plain stitch is worked
in the direction of the side that is up, a reverse stitch in the opposite one.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from knitgraph.schemas.stitch import Stitch

from .state import Knitter

_OpHandler = Callable[["Knitter"], "Knitter"]


class StitchOp(str, Enum):
    """Primitive stitch operations."""

    KNIT = "KNIT"
    PURL = "PURL"


def execute_op(knitter: Knitter, op: StitchOp) -> Knitter:
    """
    Execute a single primitive against the current knitter state.

    Returns a new Knitter. Raises NeedlesExhaustedError if no live stitch is
    available to work.
    """
    handler = _DISPATCH.get(op)
    if handler is None:
        raise ValueError(f"Unknown stitch operation: {op!r}")
    return handler(knitter)


def plain_stitch(knitter: Knitter) -> Knitter:
    """Knit one stitch."""
    return _work_stitch(knitter, reverse=False)


def reverse_stitch(knitter: Knitter) -> Knitter:
    """Purl one stitch."""
    return _work_stitch(knitter, reverse=True)


def _work_stitch(knitter: Knitter, reverse: bool) -> Knitter:
    live, needles = knitter.needles.pop_left()
    # Read after popping: the pop may have just turned the work.
    direction = needles.side_up()
    if reverse:
        direction = direction.flip()
    new_id = knitter.next_id()
    return Knitter(
        working_fabric=knitter.working_fabric.prepend(new_id, Stitch(((live, direction),))),
        needles=needles.push_right(new_id),
        max_id=new_id.value,
    )


_DISPATCH: dict[StitchOp, _OpHandler] = {
    StitchOp.KNIT: plain_stitch,
    StitchOp.PURL: reverse_stitch,
}
