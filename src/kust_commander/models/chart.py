"""Helm chart reference models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HelmChartRef:
    name: str = ""
    version: str = ""
    repo: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> HelmChartRef:
        if not d:
            return cls()
        return cls(
            name=str(d.get("name", "") or ""),
            version=str(d.get("version", "") or ""),
            repo=str(d.get("repo", "") or ""),
        )
