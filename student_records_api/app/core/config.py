"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Student Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    # Rotation for LOG_FILE: size in bytes before rolling over, and how
    # many old files to keep.
    log_max_bytes: int = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
    log_backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "3"))

    # Path of the JSON document holding every student record.  A
    # relative path is resolved against the project root by
    # ``get_data_path``.
    data_file: str = os.getenv("DATA_FILE", "data.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    def get_data_path(self) -> Path:
        """Return the absolute path of the data file."""
        path = Path(self.data_file)
        if path.is_absolute():
            return path
        base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
        return (base_dir / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
