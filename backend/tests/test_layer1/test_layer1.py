"""Tests for the L1 inner guide step."""

import pytest

from sealforge.models.instructions import Circle


def test_adaptive_preset_has_no_inner_guide(run_step, star_design):
    assert run_step("L1.inner_guide", star_design) == []


def test_legacy_inner_guide(run_step, legacy_design):
    (guide,) = run_step("L1.inner_guide", legacy_design)
    assert isinstance(guide, Circle)
    assert guide.center == (100.0, 100.0)
    assert guide.radius == pytest.approx(84.0)
    assert guide.stroke_width == 1.0
    assert guide.stroke_color == legacy_design.color
