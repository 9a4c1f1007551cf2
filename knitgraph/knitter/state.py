"""
Knitter state for a single pattern run.

Knitter bundles the working fabric, the needles, and the highest identity
handed out so far. Knitter is frozen; stitch operations return new instances
rather than mutating state in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from knitgraph.needles.base import Needles, NeedleStyle
from knitgraph.needles.registry import empty_needles
from knitgraph.schemas.stitch import Stitch, StitchID
from knitgraph.schemas.working import WorkingFabric

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Knitter:
    """
    Simulation state threaded through a pattern.

    Attributes:
        working_fabric: Every stitch made so far, newest first.
        needles: The live stitches, in either needle style.
        max_id: Highest StitchID value allocated, or -1 before any stitch exists.
    """

    working_fabric: WorkingFabric
    needles: Needles
    max_id: int = -1

    def __post_init__(self) -> None:
        if self.max_id < -1:
            raise ValueError(f"max_id cannot be below -1, got {self.max_id}")

    def next_id(self) -> StitchID:
        """The identity the next new stitch will receive."""
        return StitchID(self.max_id + 1)

    @property
    def live_stitch_count(self) -> int:
        return len(self.needles)


def cast_on(count: int, needles: Needles) -> Knitter:
    """
    Start a run with ``count`` foundation stitches on ``needles``.

    Identities 0 through count-1 are pushed onto the right in ascending order,
    so the first stitch cast on ends up farthest from the tip. Each becomes a
    foundation stitch (no references) in the working fabric. ``needles`` must
    be empty, since identities are allocated from 0.
    """
    if count < 0:
        raise ValueError(f"cast-on count must be >= 0, got {count}")
    if len(needles) != 0:
        raise ValueError(f"cast-on needles must be empty, found {len(needles)} live stitches")
    working = WorkingFabric()
    for i in range(count):
        stitch_id = StitchID(i)
        needles = needles.push_right(stitch_id)
        working = working.prepend(stitch_id, Stitch())
    logger.debug("cast on %d stitches onto %s", count, type(needles).__name__)
    return Knitter(working_fabric=working, needles=needles, max_id=count - 1)


def initialize(count: int, style: NeedleStyle) -> Knitter:
    """Cast ``count`` stitches onto empty needles of the given style."""
    return cast_on(count, empty_needles(style))
