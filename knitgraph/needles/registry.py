"""
Needle registry: loads needle style metadata and run defaults from YAML,
validates them against the needle implementations, and exposes a read-only
query API.

The registry is a module-level singleton; call get_registry() to obtain it.
All tables are loaded and validated once at import time. Nothing writes to
the registry after startup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from knitgraph.schemas.stitch import StitchID

from .base import Needles, NeedleStyle
from .circular import CircularNeedles
from .two_sided import TwoNeedles

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class RefillMode(str, Enum):
    """How an empty left side is refilled from the right side."""

    TURN = "turn"
    SLIDE = "slide"


_REFILL_CLASSES: dict[RefillMode, type] = {
    RefillMode.TURN: TwoNeedles,
    RefillMode.SLIDE: CircularNeedles,
}


@dataclass(frozen=True)
class NeedleStyleEntry:
    """Registry metadata for one needle style."""

    id: NeedleStyle
    description: str
    turns_work: bool
    refill: RefillMode


@dataclass(frozen=True)
class DemoDefaults:
    """Stitch counts for the demonstration run."""

    cast_on_count: int
    stitch_count: int


def empty_needles(style: NeedleStyle) -> Needles:
    """Return needles of the given style, as registered, with no stitches on them."""
    try:
        style = NeedleStyle(style)
    except ValueError:
        raise ValueError(f"Unknown needle style: {style!r}") from None
    return get_registry().empty_needles(style)


class NeedleRegistry:
    """
    Read-only registry of needle styles and defaults.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self.styles: MappingProxyType[NeedleStyle, NeedleStyleEntry]
        self.default_style: NeedleStyle
        self.demo: DemoDefaults

        self._load_all()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Needle data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse needle data file {path}: {exc}") from exc

    def _load_all(self) -> None:
        self._load_styles()
        self._load_defaults()
        logger.debug("loaded %d needle styles from %s", len(self.styles), self._data_dir)

    def _load_styles(self) -> None:
        data = self._load_yaml("needle_styles.yaml")
        result: dict[NeedleStyle, NeedleStyleEntry] = {}
        for entry in data["entries"]:
            try:
                style = NeedleStyle(entry["id"])
                refill = RefillMode(entry["refill"])
            except ValueError as exc:
                raise ValueError(f"Invalid needle style entry {entry.get('id')!r}: {exc}") from exc
            result[style] = NeedleStyleEntry(
                id=style,
                description=entry["description"].strip(),
                turns_work=bool(entry["turns_work"]),
                refill=refill,
            )
        self.styles = MappingProxyType(result)

    def _load_defaults(self) -> None:
        data = self._load_yaml("defaults.yaml")
        try:
            self.default_style = NeedleStyle(data["default_style"])
        except ValueError:
            raise ValueError(f"Unknown default_style {data['default_style']!r}") from None
        demo = data["demo"]
        self.demo = DemoDefaults(
            cast_on_count=int(demo["cast_on_count"]),
            stitch_count=int(demo["stitch_count"]),
        )

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if a
        style is missing, its metadata disagrees with the implementation, or
        the defaults are out of range.
        """
        errors: list[str] = []
        for style in NeedleStyle:
            entry = self.styles.get(style)
            if entry is None:
                errors.append(f"needle style {style.value}: no entry in needle_styles")
                continue
            if entry.turns_work != _observed_turns_work(entry.refill):
                errors.append(
                    f"needle style {style.value}: turns_work={entry.turns_work} "
                    f"does not match refill={entry.refill.value} "
                    f"({_REFILL_CLASSES[entry.refill].__name__})"
                )
        if self.default_style not in self.styles:
            errors.append(f"default_style {self.default_style.value} has no style entry")
        if self.demo.cast_on_count < 0:
            errors.append(f"demo.cast_on_count must be >= 0, got {self.demo.cast_on_count}")
        if self.demo.stitch_count < 0:
            errors.append(f"demo.stitch_count must be >= 0, got {self.demo.stitch_count}")
        if errors:
            raise ValueError(
                "Needle registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_style(self, style: NeedleStyle) -> NeedleStyleEntry:
        """Return metadata for ``style``. Raises KeyError if it is not registered."""
        try:
            return self.styles[style]
        except KeyError:
            raise KeyError(f"No registry entry for needle style {style!r}") from None

    def empty_needles(self, style: NeedleStyle) -> Needles:
        """Build empty needles for ``style`` using its registered refill mode."""
        return cast(Needles, _REFILL_CLASSES[self.get_style(style).refill]())


def _observed_turns_work(refill: RefillMode) -> bool:
    """Work one stitch off a fresh needle and report whether the side up changed."""
    needles = cast(Needles, _REFILL_CLASSES[refill]())
    _, after = needles.push_right(StitchID(0)).pop_left()
    return after.side_up() != needles.side_up()


# ── Module-level singleton ─────────────────────────────────────────────────────

_registry: NeedleRegistry = NeedleRegistry()


def get_registry() -> NeedleRegistry:
    """Return the module-level registry singleton."""
    return _registry
