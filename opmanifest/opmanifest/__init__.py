"""opmanifest - Operator deployment manifest generator.

Renders an ordered set of Jinja2 templates into a single multi-document
manifest, optionally pinning the operator image to its content digest.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
