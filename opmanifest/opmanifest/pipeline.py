"""Manifest generation pipeline.

Configuring → Resolving (optional) → Rendering → Composing → Writing.
Each stage runs once, in order; the first failure aborts the run before
anything is written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from .core.models import OperatorContext, RenderedFragment, TemplateRef
from .core.settings import ManifestSettings
from .images.resolver import resolve_image
from .rendering.composer import compose_document
from .rendering.engine import JinjaRenderer, TemplateRenderer
from .rendering.io import write_manifest

logger = logging.getLogger(__name__)

ImageResolver = Callable[[str, bool], str]


def build_context(
    settings: ManifestSettings, *, resolver: ImageResolver = resolve_image
) -> OperatorContext:
    """Resolve the image and assemble the values bound into templates."""
    image = resolver(settings.image, settings.image_sha256)

    return OperatorContext(
        namespace=settings.namespace,
        operator_name=settings.operator_name,
        operator_image=image,
        image_pull_policy=settings.image_pull_policy,
        cluster_role_name=settings.operator_name,
        cluster_role_binding_name=settings.operator_name,
        rbac=settings.rbac,
    )


def template_set(settings: ManifestSettings) -> list[TemplateRef]:
    """Template set in the order given by the settings."""
    return [
        TemplateRef(name=name, path=settings.templates_dir / name)
        for name in settings.templates
    ]


def render_fragments(
    templates: Iterable[TemplateRef],
    context: OperatorContext,
    renderer: TemplateRenderer,
) -> list[RenderedFragment]:
    """Render every template in order, stopping at the first failure."""
    values = context.model_dump()
    return [
        RenderedFragment(name=template.name, body=renderer.render(template, values))
        for template in templates
    ]


def build_manifest(
    settings: ManifestSettings,
    *,
    resolver: ImageResolver = resolve_image,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Produce the composed manifest text without writing it.

    Args:
        settings: Validated run configuration
        resolver: Image reference resolver
        renderer: Template renderer, Jinja2 by default

    Returns:
        Composed multi-document manifest
    """
    context = build_context(settings, resolver=resolver)
    logger.debug(f"Context: {context.model_dump()}")

    templates = template_set(settings)
    logger.info(f"Rendering {len(templates)} template(s) from {settings.templates_dir}")

    fragments = render_fragments(templates, context, renderer or JinjaRenderer())
    return compose_document(fragments)


def generate_manifest(
    settings: ManifestSettings,
    *,
    resolver: ImageResolver = resolve_image,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Render the manifest and write it to ``settings.output_file``.

    Args:
        settings: Validated run configuration
        resolver: Image reference resolver
        renderer: Template renderer, Jinja2 by default

    Returns:
        Absolute path of the written manifest
    """
    document = build_manifest(settings, resolver=resolver, renderer=renderer)
    output_path = write_manifest(settings.output_file, document, settings.file_mode)
    logger.info(f"Wrote manifest to {output_path}")
    return output_path
