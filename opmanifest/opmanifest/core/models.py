"""Domain models for the values bound into manifest templates."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class OperatorContext(BaseModel):
    """Values a manifest template may reference.

    Field names are exactly the names available inside templates.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., min_length=1, description="Target namespace")
    operator_name: str = Field(..., min_length=1, description="Deployment name")
    operator_image: str = Field(
        ..., min_length=1, description="Image reference, tag or digest form"
    )
    image_pull_policy: str = Field(..., description="Kubernetes pull policy")
    cluster_role_name: str = Field(..., description="ClusterRole name")
    cluster_role_binding_name: str = Field(
        ..., description="ClusterRoleBinding name"
    )
    rbac: bool = Field(..., description="Emit role based access control objects")


class TemplateRef(BaseModel):
    """A single named template in the template set."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Template name")
    path: Path = Field(..., description="Template file path")


class RenderedFragment(BaseModel):
    """Rendered text of one template."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Source template name")
    body: str = Field(..., description="Rendered template text")
