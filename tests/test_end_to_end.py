"""
End-to-end tests for the public knitgraph API.

Exercises: cast on → primitive stitches → resolution for both needle styles,
using only names exported from the top-level package.
"""

from __future__ import annotations

import pytest

import knitgraph
from knitgraph import (
    Direction,
    Fabric,
    NeedlesExhaustedError,
    NeedleStyle,
    Offset,
    ResolutionError,
    Stitch,
    StitchID,
    StitchOp,
    WorkingFabric,
    initialize,
    knit_fabric,
    plain_stitch,
    repeat,
    resolve,
    reverse_stitch,
)


def test_public_names_in_all():
    for name in knitgraph.__all__:
        assert hasattr(knitgraph, name), name


@pytest.mark.parametrize("style", list(NeedleStyle))
def test_foundation_round_trip(style):
    fabric = resolve(initialize(6, style).working_fabric)
    assert fabric == Fabric(stitches=(Stitch(),) * 6)


def test_flat_knit_single_stitch():
    knitter = plain_stitch(initialize(1, NeedleStyle.TWO_SIDED))
    fabric = resolve(knitter.working_fabric)
    assert fabric.stitches == (Stitch(), Stitch(((Offset(0), Direction.BACK),)))


def test_flat_purl_single_stitch():
    knitter = reverse_stitch(initialize(1, NeedleStyle.TWO_SIDED))
    assert resolve(knitter.working_fabric)[1].refs == ((Offset(0), Direction.FACE),)


def test_circular_knit_single_stitch():
    knitter = plain_stitch(initialize(1, NeedleStyle.CIRCULAR))
    assert resolve(knitter.working_fabric)[1].refs == ((Offset(0), Direction.FACE),)


def test_no_stitches_to_work():
    with pytest.raises(NeedlesExhaustedError):
        plain_stitch(initialize(0, NeedleStyle.TWO_SIDED))


def test_hand_built_dangling_reference_fails():
    working = WorkingFabric().prepend(StitchID(0), Stitch())
    working = working.prepend(StitchID(1), Stitch(((StitchID(2), Direction.FACE),)))
    with pytest.raises(ResolutionError):
        resolve(working)


def test_ribbing_in_the_round():
    # k1 p1 ribbing over four stitches for two rounds.
    rib = repeat(StitchOp.KNIT, 1) + repeat(StitchOp.PURL, 1)
    pattern = rib + rib + rib + rib
    fabric = knit_fabric(4, NeedleStyle.CIRCULAR, pattern)
    directions = [stitch.refs[0][1] for stitch in fabric.stitches[4:]]
    assert directions == [Direction.FACE, Direction.BACK] * 4
    assert all(stitch.refs[0][0] == Offset(3) for stitch in fabric.stitches[4:])
