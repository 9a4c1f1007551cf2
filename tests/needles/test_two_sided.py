"""Tests for needles.two_sided — flat knitting on straight needles."""

from __future__ import annotations

import pytest

from knitgraph.needles import Needles, NeedlesExhaustedError, TwoNeedles
from knitgraph.schemas.stitch import Direction, StitchID


def _ids(*values: int) -> tuple[StitchID, ...]:
    return tuple(StitchID(v) for v in values)


class TestTwoNeedlesConstruction:
    def test_default_is_empty_face_up(self):
        needles = TwoNeedles()
        assert len(needles) == 0
        assert needles.side_up() == Direction.FACE

    def test_satisfies_protocol(self):
        assert isinstance(TwoNeedles(), Needles)

    def test_list_fields_promoted_to_tuple(self):
        needles = TwoNeedles(left=[StitchID(0)], right=[StitchID(1)])
        assert needles.left == _ids(0)
        assert needles.right == _ids(1)


class TestTwoNeedlesPopLeft:
    def test_pops_head_of_left(self):
        live, rest = TwoNeedles(left=_ids(3, 4), right=_ids(9)).pop_left()
        assert live == StitchID(3)
        assert rest.left == _ids(4)
        assert rest.right == _ids(9)

    def test_side_unchanged_while_left_has_stitches(self):
        _, rest = TwoNeedles(left=_ids(3), up=Direction.BACK).pop_left()
        assert rest.side_up() == Direction.BACK

    def test_turns_work_when_left_empty(self):
        live, rest = TwoNeedles(right=_ids(2, 1, 0)).pop_left()
        assert live == StitchID(2)
        assert rest.left == _ids(1, 0)
        assert rest.right == ()
        assert rest.side_up() == Direction.BACK

    def test_turning_does_not_reverse_stitches(self):
        needles = TwoNeedles(right=_ids(5, 6, 7))
        popped = []
        for _ in range(3):
            live, needles = needles.pop_left()
            popped.append(live)
        assert popped == list(_ids(5, 6, 7))

    def test_turning_twice_restores_face(self):
        needles = TwoNeedles(right=_ids(0))
        _, needles = needles.pop_left()
        needles = needles.push_right(StitchID(1))
        _, needles = needles.pop_left()
        assert needles.side_up() == Direction.FACE

    def test_raises_when_exhausted(self):
        with pytest.raises(NeedlesExhaustedError):
            TwoNeedles().pop_left()

    def test_pop_does_not_mutate(self):
        needles = TwoNeedles(left=_ids(0))
        needles.pop_left()
        assert needles.left == _ids(0)


class TestTwoNeedlesPushRight:
    def test_prepends_to_right(self):
        needles = TwoNeedles(right=_ids(0)).push_right(StitchID(1))
        assert needles.right == _ids(1, 0)

    def test_left_and_side_untouched(self):
        needles = TwoNeedles(left=_ids(4), up=Direction.BACK).push_right(StitchID(5))
        assert needles.left == _ids(4)
        assert needles.side_up() == Direction.BACK


class TestTwoNeedlesLiveIds:
    def test_live_ids_in_working_order(self):
        needles = TwoNeedles(left=_ids(3, 4), right=_ids(6, 5))
        assert needles.live_ids() == _ids(3, 4, 6, 5)
        assert len(needles) == 4
