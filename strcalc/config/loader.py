"""
Profile Loader — Load calculator settings profiles from YAML files.

Profiles live in ``profiles/<name>.yaml``. The default profile name comes
from ``STRCALC_PROFILE`` unless overridden with ``set_default_profile``.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from strcalc.config.models import CalcSettings, Profile

# Default profile directory
PROFILES_DIR = Path(__file__).parent / "profiles"

_default_profile: Optional[str] = None
_cache: dict[str, Profile] = {}


def load_profile(name: str, profiles_dir: Optional[Path] = None) -> Profile:
    """
    Load a profile by name.

    Args:
        name: Profile name (without .yaml extension)
        profiles_dir: Directory to search (default: bundled profiles)

    Returns:
        Parsed Profile

    Raises:
        FileNotFoundError: If the profile file doesn't exist
        ValueError: If the profile is invalid
    """
    path = Path(profiles_dir or PROFILES_DIR) / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return parse_profile(data, fallback_name=name)


def parse_profile(data: dict, fallback_name: str = "custom") -> Profile:
    """Parse raw YAML data into a Profile."""
    if not isinstance(data, dict):
        raise ValueError(f"Profile '{fallback_name}' must be a mapping")

    profile_data = data.get("profile", {})
    try:
        return Profile(
            name=profile_data.get("name", fallback_name),
            description=profile_data.get("description", ""),
            settings=CalcSettings(**(data.get("settings") or {})),
        )
    except ValidationError as e:
        raise ValueError(f"Invalid profile '{fallback_name}': {e}") from e


def get_profile(name: Optional[str] = None, use_cache: bool = True) -> Profile:
    """Get a profile, using cache by default."""
    name = name or get_default_profile()
    if use_cache and name in _cache:
        return _cache[name]

    profile = load_profile(name)
    _cache[name] = profile
    return profile


def get_settings(name: Optional[str] = None) -> CalcSettings:
    """Get the settings of a profile (default profile if None)."""
    return get_profile(name).settings


def clear_cache() -> None:
    """Clear the profile cache."""
    _cache.clear()


def set_default_profile(name: Optional[str]) -> None:
    """Set the default profile. None falls back to STRCALC_PROFILE."""
    global _default_profile
    _default_profile = name


def get_default_profile() -> str:
    """Get the current default profile name."""
    return _default_profile or os.environ.get("STRCALC_PROFILE", "default")
