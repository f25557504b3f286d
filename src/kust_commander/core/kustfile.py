"""Read / write access to the kustomization file in a directory."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

from kust_commander.config.settings import settings
from kust_commander.models.kustomization import Kustomization

logger = logging.getLogger(__name__)

_STR_TAG = "tag:yaml.org,2002:str"
_NULL_TAG = "tag:yaml.org,2002:null"


class ScalarText(str):
    """A string that remembers the quoting style it was read with."""

    def __new__(cls, value: str, style: str | None = None):
        obj = super().__new__(cls, value)
        obj.style = style
        return obj


def like(template, value: str) -> str:
    """Return value carrying the quoting style of template, if it had one."""
    style = getattr(template, "style", None)
    if style in ("'", '"'):
        return ScalarText(value, style)
    return value


class _TextLoader(yaml.SafeLoader):
    """Safe loader that keeps every plain scalar as its original text.

    Only an empty value resolves to null; `1.10`, `0755`, `yes` and dates
    stay strings so they are written back exactly as read.
    """

    yaml_implicit_resolvers: dict = {}


class _TextDumper(yaml.SafeDumper):
    yaml_implicit_resolvers: dict = {}


for _cls in (_TextLoader, _TextDumper):
    _cls.add_implicit_resolver(_NULL_TAG, re.compile(r"^$"), [""])


def _construct_text(loader: _TextLoader, node: yaml.ScalarNode) -> str:
    value = loader.construct_scalar(node)
    if node.style:
        return ScalarText(value, node.style)
    return value


def _represent_text(dumper: _TextDumper, data: ScalarText) -> yaml.ScalarNode:
    return dumper.represent_scalar(_STR_TAG, str(data), style=data.style)


def _represent_empty(dumper: _TextDumper, data: None) -> yaml.ScalarNode:
    return dumper.represent_scalar(_NULL_TAG, "")


_TextLoader.add_constructor(_STR_TAG, _construct_text)
_TextDumper.add_representer(ScalarText, _represent_text)
_TextDumper.add_representer(type(None), _represent_empty)


class KustomizationFile:
    """The kustomization file of a single directory.

    Errors from the filesystem and from the YAML parser are not caught here;
    callers see them as raised.
    """

    def __init__(self, directory: Path | str | None = None):
        self.directory = Path(directory) if directory is not None else settings.kustomization_dir

    @property
    def path(self) -> Path:
        """Path of the first recognised kustomization file name that exists.

        Falls back to the first recognised name when none exists yet.
        """
        for name in settings.kustomization_file_names:
            candidate = self.directory / name
            if candidate.is_file():
                return candidate
        return self.directory / settings.kustomization_file_names[0]

    def read(self) -> Kustomization:
        path = self.path
        if not path.is_file():
            names = ", ".join(settings.kustomization_file_names)
            raise FileNotFoundError(
                f"Missing kustomization file in {self.directory} (looked for {names})"
            )

        logger.debug("Reading kustomization from %s", path)
        data = yaml.load(path.read_text(encoding="utf-8"), Loader=_TextLoader)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise yaml.YAMLError(f"{path}: expected a mapping at the top level")
        return Kustomization(data=data)

    def write(self, kustomization: Kustomization) -> None:
        path = self.path
        logger.debug("Writing kustomization to %s", path)
        text = yaml.dump(
            kustomization.data,
            Dumper=_TextDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        path.write_text(text, encoding="utf-8")
