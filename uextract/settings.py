#!/usr/bin/env python3
"""
Global settings stored in ~/.uextract/settings.json.
"""

import json
import os
import sys
from pathlib import Path

SETTINGS_KEYS = ("verbose", "silent", "unreal_version", "textures")


def get_config_dir():
    """Directory holding the settings file; UEXTRACT_CONFIG_DIR overrides the default."""
    override = os.environ.get("UEXTRACT_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".uextract"


def get_settings_file():
    return get_config_dir() / "settings.json"


def load_global_settings(settings_file=None):
    """Load global settings from JSON file. Returns (settings, error_message)."""
    settings_file = Path(settings_file) if settings_file else get_settings_file()
    if settings_file.exists():
        try:
            with open(settings_file, encoding="utf-8") as f:
                settings = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON in settings file: {e}"
            print(f"Warning: {error_msg}", file=sys.stderr)
            return {}, error_msg
        except OSError as e:
            error_msg = f"Error reading settings file: {e}"
            print(f"Warning: {error_msg}", file=sys.stderr)
            return {}, error_msg
        if not isinstance(settings, dict):
            error_msg = "Settings file must contain a JSON object"
            print(f"Warning: {error_msg}", file=sys.stderr)
            return {}, error_msg
        return {k: v for k, v in settings.items() if k in SETTINGS_KEYS}, None
    return {}, None


def apply_global_settings(args, settings):
    """Apply saved settings without overriding explicit arguments."""
    if not getattr(args, "verbose", False) and settings.get("verbose", False):
        args.verbose = True
    if not getattr(args, "silent", False) and settings.get("silent", False):
        args.silent = True
    if getattr(args, "unreal_version", None) is None and settings.get("unreal_version"):
        args.unreal_version = settings["unreal_version"]
    if getattr(args, "textures", None) is None and settings.get("textures"):
        args.textures = settings["textures"]
    return args
