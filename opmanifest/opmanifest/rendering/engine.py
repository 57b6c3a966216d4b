"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from ..core.errors import TemplateRenderError
from ..core.models import TemplateRef

logger = logging.getLogger(__name__)


class TemplateRenderer(Protocol):
    """Renders one template against a context, failing with TemplateRenderError."""

    def render(self, template: TemplateRef, context: Mapping[str, Any]) -> str: ...


def load_template(template_path: Path) -> Template:
    """Load a Jinja2 template from a file path.

    Args:
        template_path: Path to the template file

    Returns:
        Compiled Jinja2 template
    """
    if not template_path.is_file():
        raise TemplateNotFound(str(template_path))

    # Use template's parent directory as loader search path
    loader = FileSystemLoader(str(template_path.parent))
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

    return env.get_template(template_path.name)


def render_template(template: TemplateRef, context: Mapping[str, Any]) -> str:
    """Render a single template.

    Args:
        template: Template set entry to render
        context: Template context data

    Returns:
        Rendered text
    """
    logger.debug(f"Rendering template: {template.path}")

    try:
        compiled = load_template(template.path)
        return compiled.render(**context)
    except TemplateNotFound as exc:
        raise TemplateRenderError(
            f"Template {template.name} not found: {template.path}", template.name
        ) from exc
    except TemplateSyntaxError as exc:
        raise TemplateRenderError(
            f"Failed to parse template {template.name}: {exc.message} (line {exc.lineno})",
            template.name,
        ) from exc
    except UndefinedError as exc:
        raise TemplateRenderError(
            f"Failed to render template {template.name}: {exc.message}",
            template.name,
        ) from exc
    except TemplateError as exc:
        raise TemplateRenderError(
            f"Failed to render template {template.name}: {exc}", template.name
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateRenderError(
            f"Failed to read template {template.name}: {exc}", template.name
        ) from exc


class JinjaRenderer:
    """TemplateRenderer backed by Jinja2 files on disk."""

    def render(self, template: TemplateRef, context: Mapping[str, Any]) -> str:
        return render_template(template, context)
