"""
Configuration management for the source window command.
"""
import json
import os
from typing import Optional


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


class Config:
    """Configuration class for the source window command."""

    def __init__(self):
        """Initialize with default configuration."""
        # Window defaults used when the command gets no arguments
        self.default_lower: int = _int_from_env("SOURCE_WINDOW_LOWER", 10)
        self.default_upper: int = _int_from_env("SOURCE_WINDOW_UPPER", 10)
        # Apply abs() to the upper bound too (lower always gets it)
        self.normalize_upper_bound: bool = False

        # Source file reading
        self.source_encoding: Optional[str] = os.getenv("SOURCE_WINDOW_ENCODING") or None
        self.encoding_sample_bytes: int = 64 * 1024  # 64KB sample for detection
        self.check_staleness: bool = True

        # Console rendering
        self.show_markers: bool = True
        self.show_line_numbers: bool = False
        self.use_color: bool = True

    @classmethod
    def from_file(cls, config_path: str) -> "Config":
        """Load configuration from a JSON file."""
        config = cls()
        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                data = json.load(f)
                for key, value in data.items():
                    if hasattr(config, key):
                        setattr(config, key, value)
        return config

    def save(self, config_path: str) -> None:
        """Save configuration to a JSON file."""
        data = {
            "default_lower": self.default_lower,
            "default_upper": self.default_upper,
            "normalize_upper_bound": self.normalize_upper_bound,
            "source_encoding": self.source_encoding,
            "encoding_sample_bytes": self.encoding_sample_bytes,
            "check_staleness": self.check_staleness,
            "show_markers": self.show_markers,
            "show_line_numbers": self.show_line_numbers,
            "use_color": self.use_color,
        }
        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)

    def __str__(self) -> str:
        """String representation of the configuration."""
        return (
            f"Config(default_lower={self.default_lower}, "
            f"default_upper={self.default_upper}, "
            f"normalize_upper_bound={self.normalize_upper_bound}, "
            f"source_encoding={self.source_encoding}, "
            f"check_staleness={self.check_staleness})"
        )
