"""Static splitter config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from semantic_splitter.config.splitting.models import SplitterConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SplitterConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_splitter_profiles() -> dict[str, SplitterConfig]:
    """Load splitter profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: SplitterConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_splitter_config(profile_name: str) -> SplitterConfig | None:
    """Return splitter config for the given profile, or None if missing."""
    return load_splitter_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def _by_alias(options: dict[str, Any]) -> dict[str, Any]:
    """Rewrite snake_case option keys to their camelCase aliases so merges never carry both."""
    fields = SplitterConfig.model_fields
    return {(fields[k].alias or k) if k in fields else k: v for k, v in options.items()}


def resolve_splitter_config(
    profile_name: str,
    inline_config: dict[str, Any] | None = None,
) -> SplitterConfig:
    """
    Resolve splitter config by profile name and optional inline overrides.
    If profile_name is "active", use the profile marked as active in static.json.
    Inline options (snake_case or camelCase) are merged over the profile and validated.
    Raises ValueError if the profile is missing; pydantic.ValidationError if options are invalid.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    base = get_splitter_config(name)
    if base is None:
        raise ValueError(f"Unknown splitter profile: {name!r}")
    if not inline_config:
        return base
    merged = {**base.model_dump(by_alias=True, exclude_none=True), **_by_alias(inline_config)}
    return SplitterConfig.model_validate(merged)
