"""Command configuration backed by environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_TEMPLATES = ["rbac.yaml", "deployment.yaml"]

_OPTION_NAMES = {
    "output_file": "--output",
    "namespace": "--namespace",
    "image": "--image",
}


class ManifestSettings(BaseSettings):
    """All inputs of a manifest generation run.

    Values come from keyword arguments (command line), then ``OPMANIFEST_*``
    environment variables, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPMANIFEST_", case_sensitive=False, frozen=True
    )

    output_file: Path = Path("manifests/arango-operator.yaml")
    templates_dir: Path = Path("manifests/templates")
    templates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEMPLATES), min_length=1
    )

    namespace: str = "default"
    image: str = "arangodb/arangodb-operator:latest"
    image_pull_policy: str = "IfNotPresent"
    image_sha256: bool = True
    operator_name: str = "arango-operator"
    rbac: bool = True

    file_mode: int = 0o644

    @field_validator("output_file", mode="before")
    @classmethod
    def _require_path(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or str(value).strip() == "":
            raise ValueError(f"{_OPTION_NAMES[info.field_name]} not specified.")
        return value

    @field_validator("namespace", "image")
    @classmethod
    def _require_text(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(f"{_OPTION_NAMES[info.field_name]} not specified.")
        return value

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_octal(cls, value: Any) -> Any:
        if isinstance(value, str):
            return int(value, 8)
        return value

    @field_validator("templates")
    @classmethod
    def _require_template_names(cls, value: list[str]) -> list[str]:
        blank = [name for name in value if not name.strip()]
        if blank:
            raise ValueError("template names must not be empty")
        return value


def _describe(error: dict[str, Any]) -> str:
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}"


def load_settings(**overrides: Any) -> ManifestSettings:
    """Build settings, turning validation failures into configuration errors.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Validated, frozen settings
    """
    try:
        return ManifestSettings(**overrides)
    except ValidationError as exc:
        message = "; ".join(_describe(error) for error in exc.errors())
        raise ConfigurationError(message) from exc
