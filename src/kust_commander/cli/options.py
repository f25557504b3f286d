"""Shared CLI options."""

from __future__ import annotations

import typer

from kust_commander.config.settings import settings
from kust_commander.models import OutputFormat

OutputOption = typer.Option(
    OutputFormat(settings.default_output), "--output", "-o", help="Output format: table, json, yaml",
)
KustomizationDirOption = typer.Option(
    None, "--kustomization-dir", "-k",
    help="Directory containing the kustomization file (default: $KUSTOMIZE_DIR or current directory)",
)
