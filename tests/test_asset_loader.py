"""
Tests for the all-or-nothing asset loader.

Covers:
- Every hat and frame decoded from the assets directory
- A single missing or corrupt file fails the whole load
- The QThread worker reports through its loaded signal and installs into the state
- Path resolution and the missing-asset check
"""
import pytest
from PIL import Image

from pfp_editor.constants import ADORNMENT_KEYS, OVERLAY_KEYS, ASSETS_DIR_ENV_VAR
from pfp_editor.services.asset_loader import (
    AssetLoadError, AssetLoadWorker, asset_path, load_asset_set,
)
from pfp_editor.utils.path_resolver import get_assets_dir, check_assets_exist


# ══════════════════════════════════════════════════════════════════════════
# load_asset_set
# ══════════════════════════════════════════════════════════════════════════

class TestLoadAssetSet:

    def test_loads_every_asset(self, assets_dir):
        adornments, overlays = load_asset_set(assets_dir)
        assert list(adornments) == ADORNMENT_KEYS
        assert list(overlays) == OVERLAY_KEYS
        assert all(img.mode == 'RGBA' for img in adornments.values())

    def test_missing_file_fails_everything(self, assets_dir):
        asset_path(assets_dir, 'hat3').unlink()
        with pytest.raises(AssetLoadError) as excinfo:
            load_asset_set(assets_dir)
        assert excinfo.value.key == 'hat3'

    def test_corrupt_file_fails_everything(self, assets_dir):
        asset_path(assets_dir, 'frame2').write_bytes(b"not a png")
        with pytest.raises(AssetLoadError) as excinfo:
            load_asset_set(assets_dir)
        assert excinfo.value.key == 'frame2'
        assert 'frame2' in str(excinfo.value)

    def test_oversized_asset_fails_everything(self, assets_dir, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
        with pytest.raises(AssetLoadError) as excinfo:
            load_asset_set(assets_dir)
        assert excinfo.value.key == ADORNMENT_KEYS[0]

    def test_asset_path(self, tmp_path):
        assert asset_path(tmp_path, 'hat1') == tmp_path / 'hat1.png'


# ══════════════════════════════════════════════════════════════════════════
# AssetLoadWorker
# ══════════════════════════════════════════════════════════════════════════

class TestAssetLoadWorker:

    def test_success_installs_assets(self, qtbot, assets_dir, state):
        worker = AssetLoadWorker(assets_dir)
        with qtbot.waitSignal(worker.loaded, timeout=5000) as blocker:
            worker.start()
        worker.wait()
        success, _message = blocker.args
        assert success
        assert worker.install_into(state)
        assert state.assets_ready
        assert set(state.overlay_images) == set(OVERLAY_KEYS)

    def test_failure_leaves_state_not_ready(self, qtbot, assets_dir, state):
        asset_path(assets_dir, 'hat1').unlink()
        worker = AssetLoadWorker(assets_dir)
        with qtbot.waitSignal(worker.loaded, timeout=5000) as blocker:
            worker.start()
        worker.wait()
        success, message = blocker.args
        assert not success
        assert 'hat1' in message
        assert not worker.install_into(state)
        assert not state.assets_ready
        assert state.adornment_images == {}

    def test_oversized_asset_reports_failure(self, qtbot, assets_dir, state, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
        worker = AssetLoadWorker(assets_dir)
        with qtbot.waitSignal(worker.loaded, timeout=5000) as blocker:
            worker.start()
        worker.wait()
        assert blocker.args[0] is False
        assert not worker.install_into(state)
        assert not state.assets_ready

    def test_run_inline(self, assets_dir, state):
        worker = AssetLoadWorker(assets_dir)
        worker.run()
        assert worker.error is None
        assert len(worker.adornment_images) == len(ADORNMENT_KEYS)


# ══════════════════════════════════════════════════════════════════════════
# Path Resolution
# ══════════════════════════════════════════════════════════════════════════

class TestAssetPaths:

    def test_override_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ASSETS_DIR_ENV_VAR, "/somewhere/else")
        assert get_assets_dir(tmp_path) == tmp_path

    def test_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ASSETS_DIR_ENV_VAR, str(tmp_path))
        assert get_assets_dir() == tmp_path

    def test_default_is_assets_folder(self, monkeypatch):
        monkeypatch.delenv(ASSETS_DIR_ENV_VAR, raising=False)
        assert get_assets_dir().name == "assets"

    def test_check_assets_exist(self, assets_dir):
        assert check_assets_exist(assets_dir) == (True, [])
        asset_path(assets_dir, 'frame1').unlink()
        ok, missing = check_assets_exist(assets_dir)
        assert not ok
        assert missing == [str(asset_path(assets_dir, 'frame1'))]
