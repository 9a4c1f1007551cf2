"""
Circular knitting on a single loop of cable (magic loop).

The two tips behave as a queue built from two stacks. When the left tip runs
out, the stitches on the right tip are slid around the cable onto the left,
which reverses their stack order. The work is never turned, so the same face
is always up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from knitgraph.schemas.stitch import Direction, StitchID

from .base import NeedlesExhaustedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CircularNeedles:
    """
    Left and right tips of a circular needle.

    Attributes:
        left_tip: Stitches waiting to be worked, tip first.
        right_tip: Stitches already worked this round, most recent first.
    """

    left_tip: tuple[StitchID, ...] = ()
    right_tip: tuple[StitchID, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.left_tip, list):
            object.__setattr__(self, "left_tip", tuple(self.left_tip))
        if isinstance(self.right_tip, list):
            object.__setattr__(self, "right_tip", tuple(self.right_tip))

    def pop_left(self) -> tuple[StitchID, CircularNeedles]:
        left, right = self.left_tip, self.right_tip
        if not left:
            if not right:
                raise NeedlesExhaustedError("no live stitches on the circular needle")
            left, right = tuple(reversed(right)), ()
            logger.debug("slid %d stitches around the cable", len(left))
        return left[0], CircularNeedles(left_tip=left[1:], right_tip=right)

    def push_right(self, stitch_id: StitchID) -> CircularNeedles:
        return CircularNeedles(left_tip=self.left_tip, right_tip=(stitch_id,) + self.right_tip)

    def side_up(self) -> Direction:
        return Direction.FACE

    def live_ids(self) -> tuple[StitchID, ...]:
        return self.left_tip + tuple(reversed(self.right_tip))

    def __len__(self) -> int:
        return len(self.left_tip) + len(self.right_tip)
