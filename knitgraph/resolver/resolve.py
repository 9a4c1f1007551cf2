"""
Resolution of a working fabric into a finished Fabric.

While knitting, stitches refer to their predecessors by permanent StitchID.
Resolution replaces each identity with an Offset: the position of the
referenced stitch among the stitches made before it, counting backward from
the immediately preceding stitch (offset 0).

A reference can only resolve to a strictly older stitch. References to the
stitch itself, to a later stitch, or to an identity that does not exist all
fail the same way, and a single failure fails the whole fabric.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from knitgraph.schemas.stitch import Fabric, Offset, Stitch, StitchID
from knitgraph.schemas.working import WorkingEntry, WorkingFabric

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class ResolutionError(Exception):
    """Raised when a stitch reference cannot be resolved to an earlier stitch.

    Attributes:
        stitch_id: The stitch carrying the unresolvable reference.
        ref: The referenced identity that was not found.
    """

    def __init__(self, stitch_id: StitchID, ref: StitchID) -> None:
        super().__init__(
            f"stitch {stitch_id.value} references stitch {ref.value}, "
            f"which was not made before it"
        )
        self.stitch_id = stitch_id
        self.ref = ref


def walk(fn: Callable[[T, Sequence[T]], R], items: Sequence[T]) -> list[R]:
    """Map ``fn`` over ``items``, passing each item together with everything after it."""
    return [fn(item, items[i + 1 :]) for i, item in enumerate(items)]


def resolve(working_fabric: WorkingFabric) -> Fabric:
    """
    Convert a working fabric into a Fabric in creation order.

    Raises ResolutionError on the first reference that does not match a stitch
    older than the one carrying it.
    """
    resolved = walk(_reref, working_fabric.entries)
    resolved.reverse()
    logger.debug("resolved working fabric of %d stitches", len(resolved))
    return Fabric(stitches=tuple(resolved))


finish = resolve


def _reref(entry: WorkingEntry, older: Sequence[WorkingEntry]) -> Stitch[Offset]:
    stitch_id, stitch = entry
    window = [older_id for older_id, _ in older]

    def to_offset(ref: StitchID) -> Offset:
        try:
            return Offset(window.index(ref))
        except ValueError:
            raise ResolutionError(stitch_id, ref) from None

    return stitch.map_refs(to_offset)
