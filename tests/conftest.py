import pytest

BASE_KUSTOMIZATION = """\
apiVersion: kustomize.config.k8s.io/v1beta1
kind: Kustomization
"""


@pytest.fixture
def write_kustomization(tmp_path):
    """Write a kustomization.yaml into tmp_path and return the directory."""

    def _write(body: str = "", name: str = "kustomization.yaml"):
        (tmp_path / name).write_text(BASE_KUSTOMIZATION + body, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def read_kustomization(tmp_path):
    def _read(name: str = "kustomization.yaml") -> str:
        return (tmp_path / name).read_text(encoding="utf-8")

    return _read
