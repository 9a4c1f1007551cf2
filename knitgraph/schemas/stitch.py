"""
Stitch and fabric data model.

A Stitch records which earlier loops a new loop is drawn through, and in which
direction. The reference type is generic: while knitting, stitches refer to
their predecessors by permanent StitchID; in a finished Fabric they refer by
Offset, a backward distance in creation order.

Direction is relative to a fixed initial frame, not to the side currently
facing the knitter, so FACE/BACK rather than knit/purl.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

RefT = TypeVar("RefT")
NewRefT = TypeVar("NewRefT")


class Direction(str, Enum):
    """Which side of the fabric a predecessor loop is entered from."""

    FACE = "FACE"
    BACK = "BACK"

    def flip(self) -> Direction:
        return Direction.BACK if self is Direction.FACE else Direction.FACE


def flip_direction(direction: Direction) -> Direction:
    """Return the opposite direction. ``flip_direction`` is an involution."""
    return direction.flip()


@dataclass(frozen=True, order=True)
class StitchID:
    """
    Permanent identity of a stitch in a working fabric.

    Assigned once at creation, strictly increasing, never reused. Identities
    stay valid even if later operations insert stitches out of order.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"StitchID must be >= 0, got {self.value}")


@dataclass(frozen=True, order=True)
class Offset:
    """
    Backward distance from a stitch to one of its predecessors.

    An offset of 0 is the immediately preceding stitch, 1 the one before that.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Offset must be >= 0, got {self.value}")


@dataclass(frozen=True)
class Stitch(Generic[RefT]):
    """
    A loop drawn through zero or more previous loops.

    Attributes:
        refs: Ordered (reference, direction) pairs. Each predecessor is entered
            in list order and exited in reverse, so the order is significant.
            An empty tuple is a foundation stitch; several entries model
            compound stitches such as decreases.

    References are not validated here; dangling references surface when the
    working fabric is resolved.
    """

    refs: tuple[tuple[RefT, Direction], ...] = ()

    def __post_init__(self) -> None:
        # Accept lists at construction sites and promote to tuples.
        if isinstance(self.refs, list):
            object.__setattr__(self, "refs", tuple(tuple(r) for r in self.refs))

    @property
    def is_foundation(self) -> bool:
        return not self.refs

    def refs_only(self) -> Iterator[RefT]:
        """Yield the referenced predecessors in order, without directions."""
        for ref, _ in self.refs:
            yield ref

    def map_refs(self, fn: Callable[[RefT], NewRefT]) -> Stitch[NewRefT]:
        """
        Rewrite every reference through ``fn``, keeping directions and order.

        If ``fn`` raises for any reference the exception propagates and no
        stitch is produced; references are never skipped.
        """
        return Stitch(tuple((fn(ref), direction) for ref, direction in self.refs))


@dataclass(frozen=True)
class Fabric:
    """
    Finished combinatorial description of a piece of knitting.

    Stitches are in creation order. Every offset carried by the stitch at
    position ``i`` is strictly less than ``i``, so each reference points at a
    stitch that already exists.
    """

    stitches: tuple[Stitch[Offset], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.stitches, tuple):
            object.__setattr__(self, "stitches", tuple(self.stitches))
        for position, stitch in enumerate(self.stitches):
            for offset in stitch.refs_only():
                if offset.value >= position:
                    raise ValueError(
                        f"stitch {position} has offset {offset.value}, "
                        f"which reaches before the start of the fabric"
                    )

    def __len__(self) -> int:
        return len(self.stitches)

    def __iter__(self) -> Iterator[Stitch[Offset]]:
        return iter(self.stitches)

    def __getitem__(self, index: int) -> Stitch[Offset]:
        return self.stitches[index]
