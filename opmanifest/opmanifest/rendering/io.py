"""File I/O operations for rendering."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..core.errors import OutputWriteError

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    The parent directory must already exist.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def write_manifest(path: Path, text: str, mode: int = 0o644) -> Path:
    """Replace the file at ``path`` with ``text``.

    Args:
        path: Destination, absolute or relative to the working directory
        text: Composed manifest
        mode: File permissions (octal)

    Returns:
        Absolute path that was written
    """
    try:
        output_path = Path(os.path.abspath(path.expanduser()))
    except (OSError, RuntimeError) as exc:
        raise OutputWriteError(
            f"Failed to get absolute output path: {exc}", path
        ) from exc

    try:
        ensure_parent(output_path)
    except OSError as exc:
        raise OutputWriteError(
            f"Failed to create output directory {output_path.parent}: {exc}",
            output_path,
        ) from exc

    try:
        atomic_write_text(output_path, text, mode=mode)
    except OSError as exc:
        raise OutputWriteError(
            f"Failed to write output file {output_path}: {exc}", output_path
        ) from exc

    logger.debug(f"Wrote {len(text)} characters to {output_path}")
    return output_path
