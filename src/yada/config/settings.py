"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".yada"


@dataclass
class StorageConfig:
    """Where the flat data files live."""

    data_dir: Path = field(default_factory=_default_config_dir)
    foods_file: str = "foods.txt"
    log_file: str = "daily_logs.txt"
    profile_file: str = "user_profile.txt"

    @property
    def foods_path(self) -> Path:
        return self.data_dir / self.foods_file

    @property
    def log_path(self) -> Path:
        return self.data_dir / self.log_file

    @property
    def profile_path(self) -> Path:
        return self.data_dir / self.profile_file


@dataclass
class ProfileDefaultsConfig:
    """Seed values for a profile entry with no previous day to copy from."""

    age: int = 30
    weight_kg: float = 70.0
    activity_level: str = "MODERATELY_ACTIVE"
    calorie_method: str = "HARRIS_BENEDICT"


@dataclass
class LogConfig:
    """Consumption log behaviour."""

    max_undo: Optional[int] = None  # None keeps every snapshot


@dataclass
class Settings:
    """Main application settings."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    profile_defaults: ProfileDefaultsConfig = field(
        default_factory=ProfileDefaultsConfig
    )
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.yada/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse storage config
        if "storage" in data:
            storage_data = data["storage"]
            if "data_dir" in storage_data:
                settings.storage.data_dir = Path(storage_data["data_dir"]).expanduser()
            for key in ("foods_file", "log_file", "profile_file"):
                if key in storage_data:
                    setattr(settings.storage, key, str(storage_data[key]))

        # Parse profile defaults
        if "profile_defaults" in data:
            prof_data = data["profile_defaults"]
            if "age" in prof_data:
                settings.profile_defaults.age = int(prof_data["age"])
            if "weight_kg" in prof_data:
                settings.profile_defaults.weight_kg = float(prof_data["weight_kg"])
            if "activity_level" in prof_data:
                settings.profile_defaults.activity_level = str(
                    prof_data["activity_level"]
                ).upper()
            if "calorie_method" in prof_data:
                settings.profile_defaults.calorie_method = str(
                    prof_data["calorie_method"]
                ).upper()

        # Parse log config
        if "log" in data:
            log_data = data["log"]
            if "max_undo" in log_data:
                max_undo = log_data["max_undo"]
                settings.log.max_undo = int(max_undo) if max_undo is not None else None

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.yada/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "storage": {
                "data_dir": str(self.storage.data_dir),
                "foods_file": self.storage.foods_file,
                "log_file": self.storage.log_file,
                "profile_file": self.storage.profile_file,
            },
            "profile_defaults": {
                "age": self.profile_defaults.age,
                "weight_kg": self.profile_defaults.weight_kg,
                "activity_level": self.profile_defaults.activity_level,
                "calorie_method": self.profile_defaults.calorie_method,
            },
            "log": {
                "max_undo": self.log.max_undo,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
