"""
WorkingFabric: the in-progress, identity-referencing stitch accumulator.

Entries are stored most-recent-first, the reverse of a finished Fabric, so
recording a new stitch is a prepend.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .stitch import Stitch, StitchID

WorkingEntry = tuple[StitchID, Stitch[StitchID]]


@dataclass(frozen=True)
class WorkingFabric:
    """
    Stitches made so far, keyed by permanent identity.

    Attributes:
        entries: (StitchID, Stitch) pairs, most recently created first.
    """

    entries: tuple[WorkingEntry, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.entries, list):
            object.__setattr__(self, "entries", tuple(self.entries))

    def prepend(self, stitch_id: StitchID, stitch: Stitch[StitchID]) -> WorkingFabric:
        """Return a new WorkingFabric with ``stitch`` recorded as the newest entry."""
        return WorkingFabric(entries=((stitch_id, stitch),) + self.entries)

    def ids(self) -> tuple[StitchID, ...]:
        return tuple(stitch_id for stitch_id, _ in self.entries)

    @property
    def latest_id(self) -> StitchID | None:
        return self.entries[0][0] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[WorkingEntry]:
        return iter(self.entries)
