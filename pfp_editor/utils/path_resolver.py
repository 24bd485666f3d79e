"""Path resolver for handling differences between development and frozen executable environments.

This module provides utility functions to locate the hat/frame assets and the
user config directory in both development (running from source) and
production (PyInstaller frozen executable) environments.
"""

import sys
import os
from pathlib import Path

from pfp_editor.constants import (
    ADORNMENT_KEYS, OVERLAY_KEYS, ASSET_FILE_EXTENSION,
    ASSETS_DIR_ENV_VAR, CONFIG_DIR_NAME,
)


def get_base_dir() -> Path:
    """Get the base directory for the application.

    In frozen mode (PyInstaller executable), returns the directory containing the executable.
    In development mode, returns the project root directory (parent of pfp_editor/).

    Returns:
        Path: Base directory path
    """
    if getattr(sys, 'frozen', False):
        return Path(os.path.dirname(sys.executable))
    # This file is in pfp_editor/utils/
    return Path(__file__).resolve().parent.parent.parent


def get_assets_dir(override=None) -> Path:
    """Get the directory holding hat1.png ... hat4.png, frame1.png, frame2.png.

    Resolution order: explicit override (config), P33L_ASSETS_DIR environment
    variable, then assets/ next to the executable or in the project root.

    Returns:
        Path: Assets directory
    """
    if override:
        return Path(override).expanduser()
    env_dir = os.environ.get(ASSETS_DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir).expanduser()
    return get_base_dir() / "assets"


def get_config_dir() -> Path:
    """Per-user config directory (~/.p33l_pfp)."""
    return Path.home() / CONFIG_DIR_NAME


def check_assets_exist(assets_dir=None) -> tuple[bool, list[str]]:
    """Check if every required asset file exists.

    Returns:
        tuple: (all_exist: bool, missing_paths: list[str])
    """
    assets_dir = Path(assets_dir) if assets_dir else get_assets_dir()
    missing = []
    for key in ADORNMENT_KEYS + OVERLAY_KEYS:
        path = assets_dir / f"{key}{ASSET_FILE_EXTENSION}"
        if not path.exists():
            missing.append(str(path))
    return (len(missing) == 0, missing)
