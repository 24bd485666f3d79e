"""
Tests for the hat/frame pickers and the numeric property controls.

Covers:
- Picker buttons appear once assets are ready, including "No Hat" / "No Frame"
- Clicking a picker button changes the selection
- Property groups shown only for the selected hat / frame
- Slider edits write to the state, and state edits move the sliders
"""
import pytest

from pfp_editor.components.asset_sidebar import AssetSidebar, NONE_KEY
from pfp_editor.components.property_sidebar import PropertySidebar
from pfp_editor.constants import ADORNMENT_KEYS, OVERLAY_KEYS


# ══════════════════════════════════════════════════════════════════════════
# AssetSidebar
# ══════════════════════════════════════════════════════════════════════════

class TestAssetSidebar:

    @pytest.fixture
    def sidebar(self, qtbot, ready_state):
        sidebar = AssetSidebar(ready_state)
        qtbot.addWidget(sidebar)
        return sidebar

    def test_only_none_buttons_before_ready(self, qtbot, state):
        sidebar = AssetSidebar(state)
        qtbot.addWidget(sidebar)
        assert list(sidebar.hat_picker.buttons) == [NONE_KEY]
        assert list(sidebar.frame_picker.buttons) == [NONE_KEY]

    def test_buttons_after_assets_load(self, qtbot, state, asset_images):
        sidebar = AssetSidebar(state)
        qtbot.addWidget(sidebar)
        state.install_assets(*asset_images)
        assert list(sidebar.hat_picker.buttons) == [NONE_KEY] + ADORNMENT_KEYS
        assert list(sidebar.frame_picker.buttons) == [NONE_KEY] + OVERLAY_KEYS

    def test_initial_selection_checked(self, sidebar):
        assert sidebar.hat_picker.buttons[NONE_KEY].isChecked()
        assert sidebar.frame_picker.buttons['frame1'].isChecked()

    def test_pick_hat(self, sidebar, ready_state):
        sidebar.hat_picker.buttons['hat3'].click()
        assert ready_state.selected_adornment == 'hat3'
        sidebar.hat_picker.buttons[NONE_KEY].click()
        assert ready_state.selected_adornment is None

    def test_pick_frame(self, sidebar, ready_state):
        sidebar.frame_picker.buttons['frame2'].click()
        assert ready_state.selected_overlay == 'frame2'
        sidebar.frame_picker.buttons[NONE_KEY].click()
        assert ready_state.selected_overlay is None
        assert ready_state.overlay_image is None

    def test_external_selection_reflected(self, sidebar, ready_state):
        ready_state.select_adornment('hat2')
        assert sidebar.hat_picker.buttons['hat2'].isChecked()
        assert not sidebar.hat_picker.buttons[NONE_KEY].isChecked()


# ══════════════════════════════════════════════════════════════════════════
# PropertySidebar
# ══════════════════════════════════════════════════════════════════════════

class TestPropertySidebar:

    @pytest.fixture
    def sidebar(self, qtbot, ready_state):
        sidebar = PropertySidebar(ready_state)
        qtbot.addWidget(sidebar)
        return sidebar

    def test_groups_follow_selection(self, sidebar, ready_state):
        assert sidebar.hat_group.isHidden()
        assert not sidebar.frame_group.isHidden()
        ready_state.select_adornment('hat1')
        ready_state.select_overlay(None)
        assert not sidebar.hat_group.isHidden()
        assert sidebar.frame_group.isHidden()

    def test_default_values(self, sidebar):
        assert sidebar.hat_size_slider.value() == 100
        assert sidebar.hat_rotation_slider.value() == 0
        assert sidebar.frame_size_slider.value() == 100
        assert sidebar.frame_opacity_slider.value() == 80
        assert not sidebar.animate_checkbox.isChecked()

    def test_hat_sliders_write_state(self, sidebar, ready_state):
        sidebar.hat_size_slider.slider.setValue(150)
        sidebar.hat_rotation_slider.slider.setValue(45)
        t = ready_state.adornment_transform
        assert t.scale == pytest.approx(1.5)
        assert t.rotation == pytest.approx(45)

    def test_frame_controls_write_state(self, qtbot, sidebar, ready_state):
        sidebar.frame_size_slider.slider.setValue(70)
        sidebar.frame_opacity_slider.value_input.clear()
        qtbot.keyClicks(sidebar.frame_opacity_slider.value_input, "55")
        sidebar.frame_rotation_slider.slider.setValue(90)
        sidebar.animate_checkbox.setChecked(True)
        s = ready_state.overlay_settings
        assert (s.size_percent, s.opacity_percent, s.rotation, s.animating) == (70, 55, 90.0, True)

    def test_out_of_range_text_ignored(self, qtbot, sidebar, ready_state):
        sidebar.frame_opacity_slider.value_input.clear()
        qtbot.keyClicks(sidebar.frame_opacity_slider.value_input, "5")
        assert ready_state.overlay_settings.opacity_percent == 80

    def test_state_edits_move_sliders(self, sidebar, ready_state):
        ready_state.update_adornment(scale=2.0, rotation=-90)
        assert sidebar.hat_size_slider.value() == 200
        assert sidebar.hat_rotation_slider.value() == 270

    def test_large_scale_pins_slider(self, sidebar, ready_state):
        ready_state.update_adornment(scale=8.0)
        assert sidebar.hat_size_slider.value() == 300
        # Syncing the slider must not write the pinned value back
        assert ready_state.adornment_transform.scale == pytest.approx(8.0)

    def test_animated_flag_synced_to_checkbox(self, sidebar, ready_state):
        ready_state.update_overlay(animating=True)
        assert sidebar.animate_checkbox.isChecked()
