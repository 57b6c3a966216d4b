from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Iterable

logger = logging.getLogger(__name__)


def run_logged(cmd: Iterable[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
    """
    Run a subprocess to completion, capturing stdout/stderr as text.
    On failure the captured output goes to the debug log and
    CalledProcessError is raised carrying it.
    """
    cmd_list = list(cmd)
    logger.debug("Running: %s", " ".join(cmd_list))
    result = subprocess.run(
        cmd_list,
        capture_output=True,
        text=True,
        **kwargs,  # type: ignore[arg-type]
    )
    if result.returncode != 0:
        for stream in (result.stdout, result.stderr):
            if stream:
                logger.debug("%s: %s", cmd_list[0], stream.rstrip())
        raise subprocess.CalledProcessError(
            result.returncode, result.args, output=result.stdout, stderr=result.stderr
        )
    return result


def missing_commands(commands: Iterable[str]) -> list[str]:
    return [name for name in commands if shutil.which(name) is None]
