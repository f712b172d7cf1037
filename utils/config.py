"""
Configuration management for Chemion glasses designer
"""
import os
import json
from dataclasses import dataclass, asdict, fields
from typing import Optional

@dataclass
class Config:
    """Configuration for Chemion glasses designer"""
    # Get the package root directory
    SDK_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    CONFIG_FILE = os.path.join(SDK_ROOT, "chemion_config.json")

    # Logging configuration
    log_level: str = "INFO"
    log_file: str = os.path.join(SDK_ROOT, "chemion_designer.log")
    console_log: bool = True
    reset_logs: bool = True

    # Service configuration
    service_url: str = "http://localhost:8000"
    request_timeout: float = 30.0  # discover and connect scan for 2s server side

    # Designer settings
    default_intensity: str = "FULL"

    def save(self, path: Optional[str] = None):
        """Save configuration to file with comments"""
        path = path or self.CONFIG_FILE
        config_data = asdict(self)

        # Create config directory if it doesn't exist
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

        comments = {
            "log_level": "Console logging level (DEBUG/INFO/ERROR)",
            "log_file": "Log file path (empty to disable file logging)",
            "reset_logs": "Reset logs on startup",
            "console_log": "Enable console logging",
            "service_url": "Base URL of the glasses web service",
            "request_timeout": "Seconds to wait for a service response",
            "default_intensity": "Initial paint intensity (OFF/QUARTER/MID/FULL)"
        }

        commented_config = {
            "_comment": "Chemion Glasses Designer Configuration",
            "_instructions": "Point service_url at the machine running the glasses service",
            "config": config_data
        }

        for key, comment in comments.items():
            commented_config[f"_{key}_comment"] = comment

        with open(path, 'w') as f:
            json.dump(commented_config, f, indent=2, sort_keys=False)

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'Config':
        """Load configuration from file or create default"""
        path = path or cls.CONFIG_FILE
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            # Create new config with defaults
            config = cls()
            config.save(path)
            return config

        config_data = data.get("config", {}) if isinstance(data, dict) else {}
        # Ignore keys left behind by older versions
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_data.items() if k in known})
