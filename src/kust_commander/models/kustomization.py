"""Kustomization document model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kust_commander.models.chart import HelmChartRef

HELM_CHARTS_KEY = "helmCharts"


@dataclass
class Kustomization:
    """A loaded kustomization document.

    Wraps the raw mapping so that keys this tool does not know about, and
    their order, are written back exactly as they were read.
    """

    data: dict[str, Any] = field(default_factory=dict)

    @property
    def helm_charts(self) -> list[dict[str, Any]]:
        """The raw helmCharts entries, or an empty list when absent or null."""
        charts = self.data.get(HELM_CHARTS_KEY)
        if not isinstance(charts, list):
            return []
        return charts

    @property
    def chart_refs(self) -> list[HelmChartRef]:
        return [HelmChartRef.from_dict(c) for c in self.helm_charts if isinstance(c, dict)]
