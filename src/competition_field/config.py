"""Field configuration dataclasses."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from competition_field.core.errors import ConfigError


@dataclass
class FieldConfig:
    """Configuration for CompetitionField and its publisher."""

    dashboard_name: str = "Field"
    log_prefix: str = "/Field/"
    robot_channel: str = "Robot"
    publish_rate: float = 50.0  # Hz, one publish per control cycle
    log_capacity: Optional[int] = None  # None = unbounded in-memory log

    # Field dimensions (meters)
    field_length: float = 16.54
    field_width: float = 8.21

    @property
    def robot_log_path(self) -> str:
        return self.log_prefix + self.robot_channel

    def log_path(self, type_name: str) -> str:
        return self.log_prefix + type_name

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "FieldConfig":
        """Load config from YAML file."""
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"{yaml_path}: expected a mapping at top level")

        field_data = data.get("field") or {}
        telemetry_data = data.get("telemetry") or {}
        for section, value in (("field", field_data), ("telemetry", telemetry_data)):
            if not isinstance(value, dict):
                raise ConfigError(f"{yaml_path}: '{section}' must be a mapping")

        try:
            log_capacity = telemetry_data.get("log_capacity")
            if log_capacity is not None:
                log_capacity = int(log_capacity)
            config = cls(
                dashboard_name=str(telemetry_data.get("dashboard_name", "Field")),
                log_prefix=str(telemetry_data.get("log_prefix", "/Field/")),
                robot_channel=str(telemetry_data.get("robot_channel", "Robot")),
                publish_rate=float(telemetry_data.get("publish_rate", 50.0)),
                log_capacity=log_capacity,
                field_length=float(field_data.get("length", 16.54)),
                field_width=float(field_data.get("width", 8.21)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{yaml_path}: {e}") from e

        if config.publish_rate <= 0:
            raise ConfigError(f"{yaml_path}: publish_rate must be positive")
        if config.log_capacity is not None and config.log_capacity < 0:
            raise ConfigError(f"{yaml_path}: log_capacity must not be negative")
        return config

    @classmethod
    def defaults(cls) -> "FieldConfig":
        """Create with default values."""
        return cls()


# Default config path
DEFAULT_FIELD_YAML = Path(__file__).parent.parent.parent / "config" / "field.yaml"


def load_field_config(yaml_path: Optional[Path] = None) -> FieldConfig:
    """Load field config from YAML, falling back to defaults."""
    path = yaml_path or DEFAULT_FIELD_YAML
    if path.exists():
        return FieldConfig.from_yaml(path)
    return FieldConfig.defaults()
