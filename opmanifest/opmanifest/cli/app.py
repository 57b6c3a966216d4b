"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from ..core.errors import ImageResolutionError, ManifestError
from ..core.settings import DEFAULT_TEMPLATES, load_settings
from ..pipeline import generate_manifest
from .parsers import parse_file_mode, parse_template_names

logger = logging.getLogger(__name__)

ENV_PREFIX = "OPMANIFEST_"

app = typer.Typer(
    name="opmanifest",
    help="Render the operator deployment manifest from Jinja2 templates.",
    add_completion=False,
)


@app.command()
def render(
    output_file: Annotated[
        str,
        typer.Option(
            "--output",
            envvar=f"{ENV_PREFIX}OUTPUT_FILE",
            help="Path of the generated manifest file.",
            metavar="PATH",
        ),
    ] = "manifests/arango-operator.yaml",
    templates_dir: Annotated[
        Path,
        typer.Option(
            "--templates-dir",
            envvar=f"{ENV_PREFIX}TEMPLATES_DIR",
            help="Directory containing manifest templates.",
            metavar="DIR",
        ),
    ] = Path("manifests/templates"),
    templates: Annotated[
        list[str],
        typer.Option(
            "--template",
            envvar=f"{ENV_PREFIX}TEMPLATES",
            help="Template to render, in output order. Repeatable.",
            metavar="NAME",
            callback=parse_template_names,
        ),
    ] = list(DEFAULT_TEMPLATES),
    namespace: Annotated[
        str,
        typer.Option(
            "--namespace",
            envvar=f"{ENV_PREFIX}NAMESPACE",
            help="Namespace in which the operator will be deployed.",
        ),
    ] = "default",
    image: Annotated[
        str,
        typer.Option(
            "--image",
            envvar=f"{ENV_PREFIX}IMAGE",
            help="Fully qualified image name of the operator.",
        ),
    ] = "arangodb/arangodb-operator:latest",
    image_pull_policy: Annotated[
        str,
        typer.Option(
            "--image-pull-policy",
            envvar=f"{ENV_PREFIX}IMAGE_PULL_POLICY",
            help="Pull policy of the operator image.",
        ),
    ] = "IfNotPresent",
    image_sha256: Annotated[
        bool,
        typer.Option(
            "--image-sha256/--no-image-sha256",
            envvar=f"{ENV_PREFIX}IMAGE_SHA256",
            help="Pin the image to its sha256 repository digest.",
        ),
    ] = True,
    operator_name: Annotated[
        str,
        typer.Option(
            "--operator-name",
            envvar=f"{ENV_PREFIX}OPERATOR_NAME",
            help="Name of the operator deployment.",
        ),
    ] = "arango-operator",
    rbac: Annotated[
        bool,
        typer.Option(
            "--rbac/--no-rbac",
            envvar=f"{ENV_PREFIX}RBAC",
            help="Use role based access control.",
        ),
    ] = True,
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            envvar=f"{ENV_PREFIX}FILE_MODE",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "0644",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render manifest templates into a single multi-document file."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    mode = parse_file_mode(file_mode)

    try:
        settings = load_settings(
            output_file=output_file,
            templates_dir=templates_dir,
            templates=templates,
            namespace=namespace,
            image=image,
            image_pull_policy=image_pull_policy,
            image_sha256=image_sha256,
            operator_name=operator_name,
            rbac=rbac,
            file_mode=mode,
        )
        logger.debug(f"Config: {len(settings.templates)} template(s)")
        generate_manifest(settings)
    except ImageResolutionError as exc:
        diagnostic = exc.output.strip()
        logger.error(f"{exc}: {diagnostic}" if diagnostic else str(exc))
        raise typer.Exit(code=1) from exc
    except ManifestError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
