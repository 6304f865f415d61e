"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pendulum import Duration
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.models import DEFAULT_TIMEZONE, TimeInterval, TimeOfDay

logger = logging.getLogger(__name__)


class DefaultsConfig(BaseModel):
    """Default settings for slot planning."""
    slot_minutes: int = 30
    step_minutes: Optional[int] = None
    window_start: str = "08:00:00"
    window_end: str = "17:00:00"

    @field_validator("slot_minutes", "step_minutes")
    @classmethod
    def validate_minutes(cls, value: Optional[int]) -> Optional[int]:
        """Ensure slot and step lengths are positive."""
        if value is not None and value <= 0:
            raise ValueError("slot_minutes and step_minutes must be greater than zero")
        return value

    @field_validator("window_start", "window_end")
    @classmethod
    def validate_time_of_day(cls, value: str) -> str:
        """Validate the "HH:MM:SS" layout; LayoutError is a ValueError."""
        TimeOfDay.parse(value)
        return value

    @model_validator(mode="after")
    def validate_window_order(self) -> "DefaultsConfig":
        """Ensure the configured window opens before it closes."""
        if self.window_end <= self.window_start:
            raise ValueError("window_end must be later than window_start")
        return self

    def slot_duration(self) -> Duration:
        return pendulum.duration(minutes=self.slot_minutes)

    def step_duration(self) -> Optional[Duration]:
        if self.step_minutes is None:
            return None
        return pendulum.duration(minutes=self.step_minutes)


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = DEFAULT_TIMEZONE
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    schedule_file: Optional[Path] = None

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone name is known to pendulum."""
        try:
            pendulum.timezone(value)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: '{value}'") from exc
        return value

    def get_window(self) -> TimeInterval:
        """Get the configured planning window in the configured timezone."""
        return TimeInterval.parse_pair_in(
            self.defaults.window_start,
            self.defaults.window_end,
            self.timezone,
        )

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        config = cls(**data)

        # Relative schedule paths are resolved next to the config file
        if config.schedule_file is not None and not config.schedule_file.is_absolute():
            config.schedule_file = config_path.parent / config.schedule_file

        logger.debug("Loaded configuration from %s", config_path)
        return config


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of zeit/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
