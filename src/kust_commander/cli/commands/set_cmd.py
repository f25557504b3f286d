"""kcom set <field> - Set values in the kustomization file."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
import yaml

from kust_commander.cli.options import KustomizationDirOption, OutputOption
from kust_commander.core.errors import HelmVersionError
from kust_commander.core.helm_version import parse_chart_versions, set_helm_versions
from kust_commander.core.kustfile import KustomizationFile
from kust_commander.models import OutputFormat
from kust_commander.output.formatters import output_chart_updates

app = typer.Typer(no_args_is_help=True)

HELM_VERSION_EPILOG = """\
The command

  kcom set helmversion my-chart=1.2.3 my-other-chart=4.5.6

will edit the version of the helm charts in the kustomization file to the specified versions:

\b
helmCharts:
- name: my-chart
  version: 1.2.3
  repo: oci://myrepo
- name: my-other-chart
  version: 4.5.6
  repo: oci://myrepo
"""


@app.command("helmversion", epilog=HELM_VERSION_EPILOG)
def helm_version(
    charts: Optional[List[str]] = typer.Argument(None, help="Chart versions as chartName=version", show_default=False),
    kustomization_dir: Optional[Path] = KustomizationDirOption,
    output: OutputFormat = OutputOption,
) -> None:
    """Sets helm chart versions in the kustomization file."""
    try:
        chart_map = parse_chart_versions(charts or [])
    except HelmVersionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    kfile = KustomizationFile(kustomization_dir)
    try:
        updates = set_helm_versions(chart_map, kfile)
    except (OSError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output_chart_updates(updates, output)
