"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

KUSTOMIZATION_FILE_NAMES: tuple[str, ...] = (
    "kustomization.yaml",
    "kustomization.yml",
    "Kustomization",
)


def _default_kustomization_dir() -> Path:
    """Return the directory holding the kustomization file.

    KUSTOMIZE_DIR wins over the current working directory.
    """
    env_dir = os.environ.get("KUSTOMIZE_DIR", "")
    if env_dir:
        return Path(env_dir)
    return Path.cwd()


def _default_log_level() -> str:
    return os.environ.get("KCOM_LOG_LEVEL", "") or "WARNING"


@dataclass
class Settings:
    kustomization_dir: Path = field(default_factory=_default_kustomization_dir)
    kustomization_file_names: tuple[str, ...] = KUSTOMIZATION_FILE_NAMES
    default_output: str = "table"  # "table", "json" or "yaml"
    log_level: str = field(default_factory=_default_log_level)


# Global singleton
settings = Settings()
