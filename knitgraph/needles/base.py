"""
Needle protocol shared by every needle style.

Needles hold the live stitches: those on the needle but not yet worked.
Knitting pops the next live stitch from the left and pushes the newly made
stitch onto the right. What happens when the left side runs out depends on the
style: flat work turns over, circular work slides along the cable.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

from knitgraph.schemas.stitch import Direction, StitchID

NeedlesT = TypeVar("NeedlesT", bound="Needles")


class NeedleStyle(str, Enum):
    """Supported ways of holding and working live stitches."""

    TWO_SIDED = "TWO_SIDED"
    CIRCULAR = "CIRCULAR"


class NeedlesExhaustedError(Exception):
    """Raised when a stitch is requested from needles with no live stitches."""


@runtime_checkable
class Needles(Protocol):
    """Protocol that all needle implementations must satisfy.

    Implementations are immutable: ``pop_left`` and ``push_right`` return new
    needle values and leave the receiver unchanged.
    """

    def pop_left(self: NeedlesT) -> tuple[StitchID, NeedlesT]:
        """Remove the next live stitch. Raises NeedlesExhaustedError if none remain."""
        ...

    def push_right(self: NeedlesT, stitch_id: StitchID) -> NeedlesT:
        """Place a newly made stitch on the far side."""
        ...

    def side_up(self) -> Direction:
        """Which direction a plain stitch is worked in right now."""
        ...

    def live_ids(self) -> tuple[StitchID, ...]:
        """All live stitches, next to be worked first."""
        ...

    def __len__(self) -> int: ...
