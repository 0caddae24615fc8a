"""
Configuration management for redpill
"""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
import yaml

# Load environment variables from .env file
load_dotenv()

CONFIG_DIR = Path("~/.config/redpill").expanduser()
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "REDPILL_INSPECTOR": "inspector",
    "REDPILL_LSOF": "lsof_path",
    "REDPILL_PS": "ps_path",
    "REDPILL_POLL_ATTEMPTS": "kill_poll_attempts",
    "REDPILL_POLL_INTERVAL": "kill_poll_interval",
    "REDPILL_COMMAND_WIDTH": "command_width",
}

@dataclass
class Config:
    """Configuration data"""
    # Process inspection backend
    inspector: str = "lsof"
    lsof_path: str = "lsof"
    ps_path: str = "ps"

    # Termination settings
    kill_poll_attempts: int = 10
    kill_poll_interval: float = 0.1  # Seconds between liveness probes

    # Display settings
    command_width: int = 50

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from file and environment

        A missing file is not an error, the defaults are used instead.

        Args:
            path: Path to YAML config file (defaults to REDPILL_CONFIG or CONFIG_FILE)

        Returns:
            Config object

        Raises:
            ConfigError: If the file or an override holds invalid values
        """
        if path is None:
            env_path = os.getenv("REDPILL_CONFIG")
            path = Path(env_path).expanduser() if env_path else CONFIG_FILE

        data: Dict[str, Any] = {}
        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Could not read {path}: {e}")

            if not isinstance(data, dict):
                raise ConfigError(f"{path} must contain a mapping of settings")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown setting(s) in {path}: {', '.join(unknown)}")

        # Environment variables take precedence over the config file
        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                data[key] = value

        config = cls(**data)
        config._coerce()
        return config

    def _coerce(self) -> None:
        """Convert and validate settings"""
        try:
            self.kill_poll_attempts = int(self.kill_poll_attempts)
            self.kill_poll_interval = float(self.kill_poll_interval)
            self.command_width = int(self.command_width)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric setting: {e}")

        if self.kill_poll_attempts < 0:
            raise ConfigError("kill_poll_attempts must not be negative")
        if self.kill_poll_interval < 0:
            raise ConfigError("kill_poll_interval must not be negative")
        if self.command_width < 2:
            raise ConfigError("command_width must be at least 2")

        for key in ("inspector", "lsof_path", "ps_path"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{key} must be a non-empty string")

class ConfigError(Exception):
    """Configuration error"""
    pass
