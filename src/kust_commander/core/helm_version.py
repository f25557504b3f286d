"""Set helm chart versions in a kustomization file."""

from __future__ import annotations

import logging
from typing import Iterable

from kust_commander.core.errors import EmptyArgumentsError, EmptyFieldError, MalformedArgumentError
from kust_commander.core.kustfile import KustomizationFile, like
from kust_commander.models import ChartUpdate

logger = logging.getLogger(__name__)


def parse_chart_versions(args: Iterable[str]) -> dict[str, str]:
    """Parse `chartName=version` arguments into a name -> version mapping.

    The first invalid argument aborts parsing. A chart named twice keeps the
    last version given.
    """
    args = list(args)
    if not args:
        raise EmptyArgumentsError()

    chart_map: dict[str, str] = {}
    for arg in args:
        chart_name, sep, version = arg.partition("=")
        if not sep:
            raise MalformedArgumentError(arg)
        if not chart_name or not version:
            raise EmptyFieldError(arg)
        chart_map[chart_name] = version
    return chart_map


def set_helm_versions(chart_map: dict[str, str], kfile: KustomizationFile) -> list[ChartUpdate]:
    """Rewrite the version of every helmCharts entry named in chart_map.

    The whole document is read and written back, even when nothing matched.
    Returns the rewritten entries in document order.
    """
    kustomization = kfile.read()

    updates: list[ChartUpdate] = []
    for i, chart in enumerate(kustomization.helm_charts):
        if not isinstance(chart, dict):
            continue
        name = chart.get("name")
        if not isinstance(name, str) or name not in chart_map:
            continue
        new_version = chart_map[name]
        old_version = chart.get("version")
        chart["version"] = like(old_version, new_version)
        updates.append(ChartUpdate(
            name=str(name),
            old_version="" if old_version is None else str(old_version),
            new_version=new_version,
            index=i,
        ))

    known = {ref.name for ref in kustomization.chart_refs}
    for name in chart_map:
        if name not in known:
            logger.debug("Helm chart %s not found in %s", name, kfile.path)

    kfile.write(kustomization)
    return updates
