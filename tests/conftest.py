"""Shared pytest fixtures for opmanifest tests."""

import os
from pathlib import Path

import pytest

from opmanifest.core.settings import ManifestSettings

SHIPPED_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "manifests" / "templates"

RBAC_TEMPLATE = """\
{% if rbac %}
kind: ClusterRoleBinding
metadata:
  name: {{ cluster_role_binding_name }}
roleRef:
  name: {{ cluster_role_name }}
subjects:
- namespace: {{ namespace }}
{% endif %}
"""

DEPLOYMENT_TEMPLATE = """\
kind: Deployment
metadata:
  name: {{ operator_name }}
  namespace: {{ namespace }}
spec:
{% if rbac %}
  serviceAccountName: default
{% endif %}
  image: {{ operator_image }}
  imagePullPolicy: {{ image_pull_policy }}
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep OPMANIFEST_* variables of the host out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("OPMANIFEST_"):
            monkeypatch.delenv(name)


@pytest.fixture
def shipped_templates_dir() -> Path:
    """Return the templates directory that ships with the repository."""
    return SHIPPED_TEMPLATES_DIR


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Create a templates directory with rbac.yaml and deployment.yaml."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "rbac.yaml").write_text(RBAC_TEMPLATE, encoding="utf-8")
    (directory / "deployment.yaml").write_text(DEPLOYMENT_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    """Destination inside a directory that does not exist yet."""
    return tmp_path / "out" / "manifests" / "operator.yaml"


@pytest.fixture
def settings(templates_dir: Path, output_file: Path) -> ManifestSettings:
    """Settings for the prod scenario with digest pinning disabled."""
    return ManifestSettings(
        output_file=output_file,
        templates_dir=templates_dir,
        templates=["rbac.yaml", "deployment.yaml"],
        namespace="prod",
        image="org/app:1.0",
        image_sha256=False,
        rbac=True,
    )
