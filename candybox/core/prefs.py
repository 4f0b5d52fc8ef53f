"""Preference storage

Reads and writes the sound on/off preference.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .models import Preferences

logger = logging.getLogger(__name__)


def ensure_prefs_dir(prefs_path: str) -> None:
    """Create the parent directory of the preference file."""
    Path(prefs_path).parent.mkdir(parents=True, exist_ok=True)


def load_prefs(prefs_path: str) -> Preferences:
    """Load preferences, falling back to defaults.

    Args:
        prefs_path: preference file path

    Returns:
        Preferences object (defaults if missing or unreadable)
    """
    if not os.path.exists(prefs_path):
        return Preferences()

    try:
        with open(prefs_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return Preferences.model_validate(data)
    except (OSError, ValueError, ValidationError) as e:
        logger.warning("Failed to load preferences from %s: %s", prefs_path, e)
        return Preferences()


def save_prefs(prefs: Preferences, prefs_path: str) -> bool:
    """Write preferences to disk.

    Returns:
        Whether the write succeeded
    """
    try:
        ensure_prefs_dir(prefs_path)
        with open(prefs_path, "w", encoding="utf-8") as f:
            json.dump(prefs.model_dump(), f, ensure_ascii=False, indent=2)
        return True
    except OSError as e:
        logger.warning("Failed to save preferences to %s: %s", prefs_path, e)
        return False
