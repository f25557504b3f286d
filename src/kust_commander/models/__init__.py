"""Data models for Kustomize Commander."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class OutputFormat(str, enum.Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


@dataclass
class ChartUpdate:
    """One helmCharts entry whose version was rewritten."""

    name: str
    old_version: str
    new_version: str
    index: int = 0

    @property
    def changed(self) -> bool:
        return self.old_version != self.new_version
