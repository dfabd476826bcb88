"""
ATHN - parser for the ATHN line-oriented hypertext format.

Turns raw ATHN text into a typed Document (metadata, body lines, header,
footer and form fields) or raises a ParseError.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.config import DEFAULT_CONFIG, ParserConfig
from .core.document_parser import parse_document
from .core.errors import AthnError, ErrorKind, ParseError


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("athn")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_document",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "AthnError",
    "ParseError",
    "ErrorKind",
]
