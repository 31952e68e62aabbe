"""
Quick-fill presets for the calculator form.

Each preset is a partial set of form fields (camelCase, as submitted by the
form) describing a typical lifestyle. Applying a preset overrides only the
fields it names.
"""

import copy
from typing import Any, Dict, List


class UnknownPresetError(KeyError):
    """Raised when a preset name is not defined."""


PRESETS: Dict[str, Dict[str, Any]] = {
    "active": {
        "activityLevel": "active",
        "vo2max": 45,
        "walkSpeed": 1.3,
        "gripStrength": 35,
        "sleepHours": 7.5,
        "sleepQuality": "good",
        "stressLevel": "moderate",
        "dietQuality": "good",
    },
    "sedentary": {
        "activityLevel": "sedentary",
        "vo2max": 28,
        "walkSpeed": 0.9,
        "gripStrength": 22,
        "sleepHours": 6,
        "sleepQuality": "fair",
        "stressLevel": "high",
        "dietQuality": "fair",
    },
    "sleep": {
        "sleepHours": 8,
        "sleepQuality": "excellent",
        "stressLevel": "low",
    },
    "diet": {
        "dietQuality": "excellent",
    },
}


def list_presets() -> List[str]:
    return list(PRESETS)


def get_preset(name: str) -> Dict[str, Any]:
    """Return a copy of the named preset's fields."""
    try:
        return copy.deepcopy(PRESETS[name])
    except KeyError:
        raise UnknownPresetError(name) from None


def apply_preset(name: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge a preset into draft form fields.

    Args:
        name: Preset name (see list_presets()).
        fields: Current form fields. Not modified.

    Returns:
        New dict with the preset's values taking precedence.
    """
    merged = dict(fields)
    merged.update(get_preset(name))
    return merged
