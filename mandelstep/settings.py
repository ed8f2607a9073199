"""
Viewer settings loaded from settings.json.

The JSON file shipped next to this module holds the defaults a user is
expected to edit. Anything missing from it falls back to DEFAULT_SETTINGS.
"""

import copy
import json
import os


SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')

DEFAULT_SETTINGS = {
    "width": 0,             # 0 = use the screen resolution
    "height": 0,
    "fullscreen": True,
    "palette": {
        "start": 0.0,
        "rotations": 3.0,
        "hue": 1.0,
        "gamma": 1.0,
        "levels": 1000,
    },
    "max_steps": None,      # None = one step per palette entry
    "background": [255, 255, 255],
    "frame_delay_ms": 1,
    "screenshot_dir": ".",
}


def _merge(base, override):
    """Recursively overlay override onto a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path=None):
    """
    Load settings from a JSON file, filling gaps from DEFAULT_SETTINGS.

    Args:
        path: JSON file to read (default: settings.json in this package)

    Returns:
        Settings dict. A missing or unreadable file yields the defaults.
    """
    settings_path = path or SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            loaded = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Warning: Could not load {os.path.basename(settings_path)}: {e}")
        return copy.deepcopy(DEFAULT_SETTINGS)
    if not isinstance(loaded, dict):
        print(f"Warning: {os.path.basename(settings_path)} must hold a JSON object, ignoring it")
        return copy.deepcopy(DEFAULT_SETTINGS)
    return _merge(DEFAULT_SETTINGS, loaded)
