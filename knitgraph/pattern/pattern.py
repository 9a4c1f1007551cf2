"""
Pattern execution: sequence primitive stitches over a knitter, then resolve.

A full run is:

  1. cast_on()         → Knitter with foundation stitches on the needles
  2. run_pattern()     → every StitchOp applied in order; PatternError on the
                         first operation that is unknown or finds the
                         needles empty
  3. resolve()         → Fabric; ResolutionError if a reference is dangling

There is no partial result. knit_fabric() raises on failure;
simulate_pattern() never raises and reports the failure in a PatternResult.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from knitgraph.knitter.operations import StitchOp, execute_op
from knitgraph.knitter.state import Knitter, initialize
from knitgraph.needles.base import NeedlesExhaustedError, NeedleStyle
from knitgraph.needles.registry import get_registry
from knitgraph.resolver.resolve import ResolutionError, resolve
from knitgraph.schemas.stitch import Fabric

logger = logging.getLogger(__name__)


class PatternError(Exception):
    """Raised when an operation in a pattern cannot be worked.

    Attributes:
        operation_index: Index of the failing operation within the pattern.
        detail: Human-readable description of the failure.
    """

    def __init__(self, operation_index: int, detail: str) -> None:
        super().__init__(f"[operation {operation_index}] {detail}")
        self.operation_index = operation_index
        self.detail = detail


@dataclass(frozen=True)
class Pattern:
    """
    An ordered sequence of primitive stitch operations.

    Patterns concatenate with ``+``.
    """

    operations: tuple[StitchOp, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.operations, tuple):
            object.__setattr__(self, "operations", tuple(self.operations))

    def __add__(self, other: Pattern) -> Pattern:
        if not isinstance(other, Pattern):
            return NotImplemented
        return Pattern(self.operations + other.operations)

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self) -> Iterator[StitchOp]:
        return iter(self.operations)


def repeat(op: StitchOp, count: int) -> Pattern:
    """Create a pattern of ``count`` copies of ``op``."""
    if count < 0:
        raise ValueError(f"repeat count must be >= 0, got {count}")
    return Pattern((op,) * count)


@dataclass(frozen=True)
class PatternResult:
    """Outcome of a full pattern run.

    Attributes:
        passed: True only when every operation and the resolution succeeded.
        fabric: The resolved Fabric, or None if the run failed.
        error: Error message if the run failed, else None.
    """

    passed: bool
    fabric: Fabric | None
    error: str | None


def run_pattern(knitter: Knitter, pattern: Iterable[StitchOp | str]) -> Knitter:
    """
    Apply every operation in ``pattern`` to ``knitter`` in order.

    Returns the final Knitter. Stops at the first operation that is unknown
    or cannot be worked and raises PatternError; the remaining operations are
    not run. Plain strings naming a StitchOp are accepted.
    """
    count = 0
    for i, raw_op in enumerate(pattern):
        try:
            op = StitchOp(raw_op)
        except ValueError:
            raise PatternError(i, f"Unknown stitch operation: {raw_op!r}") from None
        try:
            knitter = execute_op(knitter, op)
        except NeedlesExhaustedError as exc:
            raise PatternError(i, f"{op.value}: {exc}") from exc
        count += 1
    logger.debug("worked %d operations, %d stitches made", count, len(knitter.working_fabric))
    return knitter


def knit_fabric(count: int, style: NeedleStyle, pattern: Iterable[StitchOp | str]) -> Fabric:
    """
    Cast on ``count`` stitches, work ``pattern``, and resolve the result.

    Raises
    ------
    PatternError
        If an operation is unknown or finds no live stitch to work.
    ResolutionError
        If the working fabric contains a dangling reference.
    """
    knitter = run_pattern(initialize(count, style), pattern)
    return resolve(knitter.working_fabric)


def simulate_pattern(
    count: int,
    style: NeedleStyle,
    pattern: Iterable[StitchOp | str],
) -> PatternResult:
    """
    Run a pattern like :func:`knit_fabric`, but report failure instead of raising.

    Returns
    -------
    PatternResult
        Always returned. ``fabric`` is None whenever ``passed`` is False.
    """
    try:
        fabric = knit_fabric(count, style, pattern)
    except (PatternError, ResolutionError) as exc:
        logger.debug("pattern run failed: %s", exc)
        return PatternResult(passed=False, fabric=None, error=str(exc))
    return PatternResult(passed=True, fabric=fabric, error=None)


def demo_fabric(style: NeedleStyle | None = None) -> Fabric:
    """
    Knit the demonstration fabric: the configured cast-on, then plain stitches.

    Uses the registry's default needle style when ``style`` is None.
    """
    registry = get_registry()
    if style is None:
        style = registry.default_style
    demo = registry.demo
    return knit_fabric(demo.cast_on_count, style, repeat(StitchOp.KNIT, demo.stitch_count))
