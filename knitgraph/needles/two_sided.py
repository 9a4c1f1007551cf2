"""
Flat knitting on a pair of straight needles.

Both needles are stacks listed from tip to base. Working a stitch moves it from
the left needle to the right. When the left needle is empty the work is turned:
the right needle becomes the left one and the other face of the fabric is up.
The stitches are not reversed on turning, because the tip-to-base order on the
turned needle already matches the order they will be worked in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from knitgraph.schemas.stitch import Direction, StitchID

from .base import NeedlesExhaustedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoNeedles:
    """
    Two straight needles and the side currently facing the knitter.

    Attributes:
        left: Stitches waiting to be worked, tip first.
        right: Stitches already worked this row, tip (most recent) first.
        up: Direction a plain stitch is worked in on the current row.
    """

    left: tuple[StitchID, ...] = ()
    right: tuple[StitchID, ...] = ()
    up: Direction = Direction.FACE

    def __post_init__(self) -> None:
        if isinstance(self.left, list):
            object.__setattr__(self, "left", tuple(self.left))
        if isinstance(self.right, list):
            object.__setattr__(self, "right", tuple(self.right))

    def pop_left(self) -> tuple[StitchID, TwoNeedles]:
        left, right, up = self.left, self.right, self.up
        if not left:
            if not right:
                raise NeedlesExhaustedError("no live stitches on either needle")
            left, right, up = right, (), up.flip()
            logger.debug("turned work with %d stitches, %s now up", len(left), up.value)
        return left[0], TwoNeedles(left=left[1:], right=right, up=up)

    def push_right(self, stitch_id: StitchID) -> TwoNeedles:
        return TwoNeedles(left=self.left, right=(stitch_id,) + self.right, up=self.up)

    def side_up(self) -> Direction:
        return self.up

    def live_ids(self) -> tuple[StitchID, ...]:
        return self.left + self.right

    def __len__(self) -> int:
        return len(self.left) + len(self.right)
