"""Data models for version file handling."""

from enum import Enum
from typing import List

# Version specifiers are opaque strings; ordering follows the source file.
VersionSpecifier = str
ParsedVersionFile = List[VersionSpecifier]


class VersionFileFormat(Enum):
    """Enum for recognized version file formats."""
    PLAIN = "plain"
    PYPROJECT = "pyproject"
    TOOL_VERSIONS = "tool-versions"
    PIPFILE = "pipfile"
