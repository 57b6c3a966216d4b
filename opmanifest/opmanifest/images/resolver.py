"""Image reference resolution.

Pins a mutable ``repo:tag`` reference to the immutable ``repo@sha256:...``
form recorded by the local docker daemon.
"""

from __future__ import annotations

import logging
import re
import subprocess
from typing import Callable

from .._utils import missing_commands, run_logged
from ..core.errors import ImageResolutionError

logger = logging.getLogger(__name__)

DOCKER = "docker"
REPO_DIGEST_FORMAT = "--format={{index .RepoDigests 0}}"

_DIGEST_REFERENCE = re.compile(r"^\S+@sha256:[0-9a-fA-F]+$")

ImageInspector = Callable[[str], str]


def _combined(stdout: str | None, stderr: str | None) -> str:
    return "".join(part for part in (stdout, stderr) if part)


def inspect_repo_digest(image: str) -> str:
    """Look up the first repository digest of a local image.

    Args:
        image: Image reference known to the local docker daemon

    Returns:
        Digest reference, e.g. ``org/app@sha256:...``
    """
    if not image.strip():
        raise ImageResolutionError("Cannot resolve digest of an empty image name")

    missing = missing_commands([DOCKER])
    if missing:
        raise ImageResolutionError(
            f"Failed to fetch image SHA256: missing dependency: {', '.join(missing)}"
        )

    try:
        result = run_logged([DOCKER, "inspect", REPO_DIGEST_FORMAT, image])
    except subprocess.CalledProcessError as exc:
        raise ImageResolutionError(
            f"Failed to fetch image SHA256 for {image}: exit status {exc.returncode}",
            output=_combined(exc.output, exc.stderr),
        ) from exc
    except OSError as exc:
        raise ImageResolutionError(
            f"Failed to fetch image SHA256 for {image}: {exc}"
        ) from exc

    digest = result.stdout.strip()
    if not _DIGEST_REFERENCE.match(digest):
        raise ImageResolutionError(
            f"Failed to fetch image SHA256 for {image}: unexpected output {digest!r}",
            output=_combined(result.stdout, result.stderr),
        )

    return digest


def resolve_image(
    image: str, pin_digest: bool, *, inspector: ImageInspector = inspect_repo_digest
) -> str:
    """Return the image reference to bind into templates.

    Args:
        image: Configured image reference
        pin_digest: Replace the tag with the content digest
        inspector: Digest lookup, defaults to ``docker inspect``

    Returns:
        ``image`` unchanged, or its digest reference when pinning
    """
    if not pin_digest:
        return image

    digest = inspector(image).strip()
    if not digest:
        raise ImageResolutionError(f"Failed to fetch image SHA256 for {image}")
    logger.info(f"Pinned image {image} → {digest}")
    return digest
