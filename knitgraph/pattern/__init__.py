"""Pattern: sequencing primitive stitches into a complete, resolved run."""

from .pattern import (
    Pattern,
    PatternError,
    PatternResult,
    demo_fabric,
    knit_fabric,
    repeat,
    run_pattern,
    simulate_pattern,
)

__all__ = [
    "Pattern",
    "PatternError",
    "PatternResult",
    "repeat",
    "run_pattern",
    "knit_fabric",
    "simulate_pattern",
    "demo_fabric",
]
