"""
Configuration Loader - Dashboard Settings from YAML.

Reads the dashboard settings file and, optionally, one profile from the
`profiles/` directory next to it. A profile overrides individual fields
of the list sections; fields it leaves out keep the base file's values.

Design Notes:
    - Profiles live beside the file they modify, not under a fixed root
    - Only the known list sections (and version) may be overridden
    - Validation happens once, on the merged settings
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from account_dashboard.config.models import DashboardConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "default.yaml"
LIST_SECTIONS = ("friends", "transfers", "cards")

Settings = Dict[str, Any]


class ConfigLoader:
    """Loads DashboardConfig from a settings file plus optional profile."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory relative settings paths are resolved from
        """
        self.base_path = Path(base_path) if base_path is not None else Path(".")

    def load(
        self,
        config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
        profile: Optional[str] = None,
    ) -> DashboardConfig:
        """
        Load and validate dashboard settings.

        Args:
            config_path: Settings file, absolute or relative to base_path
            profile: Name of a file in `<settings dir>/profiles/` to apply

        Returns:
            Validated DashboardConfig

        Raises:
            FileNotFoundError: Settings file or profile missing
            ValueError: A file is not a mapping, or a profile names an
                unknown section
            ValidationError: Merged settings out of range
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self.base_path / path

        settings = _read_settings(path)
        if profile:
            profile_path = path.parent / "profiles" / f"{profile}.yaml"
            if not profile_path.is_file():
                raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
            settings = _apply_profile(settings, _read_settings(profile_path), profile)

        config = DashboardConfig.model_validate(settings)
        logger.info(
            f"Loaded {path.name}{f' + {profile}' if profile else ''}: retries "
            f"friends={config.friends.max_retry_count} "
            f"transfers={config.transfers.max_retry_count} "
            f"cards={config.cards.max_retry_count}"
        )
        return config


def _read_settings(path: Path) -> Settings:
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def _apply_profile(base: Settings, overrides: Settings, profile: str) -> Settings:
    merged = dict(base)
    for key, value in overrides.items():
        if key == "version":
            merged[key] = value
        elif key in LIST_SECTIONS:
            merged[key] = {**(base.get(key) or {}), **(value or {})}
        else:
            raise ValueError(f"Profile {profile!r} overrides unknown section {key!r}")
    return merged


def load_config(
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> DashboardConfig:
    """Shortcut for ConfigLoader(base_path).load(config_path, profile)."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
