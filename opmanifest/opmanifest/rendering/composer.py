"""Concatenation of rendered fragments into one multi-document manifest."""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from ..core.models import RenderedFragment

DOCUMENT_SEPARATOR = "\n---\n\n"
HEADER_PREFIX = "## "


def compose_document(fragments: Iterable[RenderedFragment]) -> str:
    """Join fragments in order, each under a ``## <name>`` header.

    Successive fragments are separated by a ``---`` document marker. Bodies
    are copied verbatim.
    """
    output = StringIO()
    for index, fragment in enumerate(fragments):
        if index > 0:
            output.write(DOCUMENT_SEPARATOR)
        output.write(f"{HEADER_PREFIX}{fragment.name}\n")
        output.write(fragment.body)
        output.write("\n")
    return output.getvalue()
