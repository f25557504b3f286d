"""Argument validation errors for kustomization edits."""

from __future__ import annotations


class HelmVersionError(Exception):
    """Base class for invalid `chart=version` arguments."""


class EmptyArgumentsError(HelmVersionError):
    def __init__(self) -> None:
        super().__init__("no helm chart version specified")


class MalformedArgumentError(HelmVersionError):
    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"invalid argument '{argument}', must be chartName=version")


class EmptyFieldError(HelmVersionError):
    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(
            f"invalid argument '{argument}', chartName and version must not be empty"
        )
