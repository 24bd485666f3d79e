"""
Tests for hat hit-testing and control button layout.

Covers:
- Body hit region scales with the hat
- Button placement (move top-left, resize top-right, rotate bottom-center)
- Buttons win over the body where they overlap
- Buttons never overlap each other across the whole scale range
"""
import itertools
from types import SimpleNamespace

import pytest

from pfp_editor.components.transform_widgets import (
    ControlLayout, ControlMode, BodyHandle, control_offset,
    is_inside_adornment, hit_control_affordance, control_centers,
)
from pfp_editor.constants import (
    CONTROL_BUTTON_RADIUS, CONTROL_BUTTON_MIN_OFFSET, ADORNMENT_SCALE_MIN, ADORNMENT_SCALE_MAX,
)
from pfp_editor.models.transform import AdornmentTransform, Vec2
from pfp_editor.utils.geometry import distance


# ══════════════════════════════════════════════════════════════════════════
# Body Region
# ══════════════════════════════════════════════════════════════════════════

class TestInsideAdornment:

    def test_center_is_inside(self):
        t = AdornmentTransform()
        assert is_inside_adornment(t.center, t)

    def test_radius_boundary(self):
        t = AdornmentTransform()  # center (200, 180), radius 60
        assert is_inside_adornment(Vec2(260, 180), t)
        assert not is_inside_adornment(Vec2(261, 180), t)

    def test_radius_grows_with_scale(self):
        t = AdornmentTransform(scale=2.0)
        assert is_inside_adornment(Vec2(200 + 110, 180), t)
        assert not is_inside_adornment(Vec2(200 + 110, 180), AdornmentTransform())

    def test_follows_offset(self):
        t = AdornmentTransform(offset_x=-150, offset_y=150)
        assert is_inside_adornment(Vec2(50, 350), t)
        assert not is_inside_adornment(Vec2(200, 180), t)


# ══════════════════════════════════════════════════════════════════════════
# Button Layout
# ══════════════════════════════════════════════════════════════════════════

class TestControlLayout:

    def test_default_offset(self):
        # 120 * 1.0 * 0.6 + 25
        assert control_offset(AdornmentTransform()) == pytest.approx(97)

    def test_offset_floor_for_tiny_hats(self):
        # Below the clamp range, so use a bare object with a scale
        assert control_offset(SimpleNamespace(scale=0.05)) == CONTROL_BUTTON_MIN_OFFSET
        assert control_offset(AdornmentTransform(scale=ADORNMENT_SCALE_MIN)) > CONTROL_BUTTON_MIN_OFFSET

    def test_button_positions(self):
        centers = control_centers(AdornmentTransform())
        assert tuple(centers[ControlMode.MOVE]) == pytest.approx((103, 83))
        assert tuple(centers[ControlMode.RESIZE]) == pytest.approx((297, 83))
        assert tuple(centers[ControlMode.ROTATE]) == pytest.approx((200, 277))

    @pytest.mark.parametrize("mode", list(ControlMode))
    def test_hit_each_button_at_its_center(self, mode):
        t = AdornmentTransform(scale=1.7, offset_x=12, offset_y=-40)
        center = control_centers(t)[mode]
        assert hit_control_affordance(center, t) == mode

    def test_button_radius_boundary(self):
        t = AdornmentTransform()
        center = control_centers(t)[ControlMode.ROTATE]
        assert hit_control_affordance(Vec2(center.x, center.y + CONTROL_BUTTON_RADIUS - 0.5), t) == ControlMode.ROTATE
        assert hit_control_affordance(Vec2(center.x, center.y + CONTROL_BUTTON_RADIUS + 0.5), t) is None

    def test_empty_space_hits_nothing(self):
        t = AdornmentTransform()
        assert hit_control_affordance(Vec2(5, 395), t) is None
        assert ControlLayout().get_handle_at_pos(Vec2(5, 395), t) is None

    @pytest.mark.parametrize("scale", [ADORNMENT_SCALE_MIN, 0.5, 1.0, 2.0, 5.0, ADORNMENT_SCALE_MAX])
    def test_buttons_never_overlap(self, scale):
        centers = list(control_centers(AdornmentTransform(scale=scale)).values())
        for a, b in itertools.combinations(centers, 2):
            assert distance(a, b) > 2 * CONTROL_BUTTON_RADIUS

    @pytest.mark.parametrize("scale", [ADORNMENT_SCALE_MIN, 1.0, 3.0, ADORNMENT_SCALE_MAX])
    def test_buttons_outside_body_region(self, scale):
        t = AdornmentTransform(scale=scale)
        for center in control_centers(t).values():
            assert not is_inside_adornment(center, t)


# ══════════════════════════════════════════════════════════════════════════
# Hit Precedence
# ══════════════════════════════════════════════════════════════════════════

class TestHitPrecedence:

    def test_body_hit_returns_body_handle(self):
        t = AdornmentTransform()
        handle = ControlLayout().get_handle_at_pos(t.center, t)
        assert isinstance(handle, BodyHandle)
        assert handle.mode == ControlMode.MOVE

    def test_button_wins_where_it_overlaps_body(self):
        # Oversized buttons reach into the body circle
        layout = ControlLayout(button_radius=90)
        t = AdornmentTransform()
        # Inside the body, towards the resize button
        point = Vec2(239, 141)
        assert layout.handles['body'].hit_test(point, t)
        handle = layout.get_handle_at_pos(point, t)
        assert handle is layout.handles['resize']
