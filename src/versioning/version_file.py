"""Version file parsers (.python-version, pyproject.toml, .tool-versions, Pipfile).

Each extractor returns the version specifiers literally present in the file,
in file order. Unparseable or incomplete files yield an empty list; errors
raised while reading the file itself propagate to the caller.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

try:
    import tomllib as toml  # type: ignore
except ImportError:  # Python < 3.11
    import tomli as toml  # type: ignore

from constants import Constants
from .models import ParsedVersionFile, VersionFileFormat

logger = logging.getLogger(__name__)


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _read_lines(version_file: str) -> List[str]:
    # utf-8-sig drops a leading BOM; only LF, CRLF and lone CR break lines
    with open(version_file, encoding="utf-8-sig", newline="") as f:
        return _LINE_BREAK.split(f.read())


def _load_toml(version_file: str) -> Optional[Dict[str, Any]]:
    """Parse a TOML file, returning None when the content is malformed."""
    with open(version_file, "rb") as f:
        raw = f.read()
    try:
        return toml.loads(raw.decode("utf-8-sig"))
    except (toml.TOMLDecodeError, UnicodeDecodeError) as e:
        logger.warning("Failed to parse %s (invalid format): %s", version_file, e)
        return None


def _extract_value(data: Dict[str, Any], keys: Sequence[str]) -> Optional[str]:
    """Walk nested tables along keys; only string leaves count."""
    node: Any = data
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node if isinstance(node, str) else None


def get_versions_input_from_plain_file(version_file: str) -> ParsedVersionFile:
    """Read one specifier per line from a plain version file.

    ``#`` starts a comment, blank lines are skipped and anything after the
    first ``/`` is dropped (``3.10/envs/virtualenv`` -> ``3.10``).

    Args:
        version_file: Path to the file

    Returns:
        List of specifiers in file order, duplicates kept
    """
    logger.debug("Trying to resolve versions from %s", version_file)
    versions: List[str] = []
    for line in _read_lines(version_file):
        version = line.split("#", 1)[0].strip()
        if not version:
            continue
        version = version.split("/", 1)[0].strip()
        if version:
            versions.append(version)
    logger.info("Resolved %s as %s", version_file, ", ".join(versions))
    return versions


def get_version_input_from_toml_file(version_file: str) -> ParsedVersionFile:
    """Extract the python constraint from a pyproject.toml manifest.

    Looks at ``project.requires-python`` first and falls back to
    ``tool.poetry.dependencies.python``.

    Args:
        version_file: Path to the manifest

    Returns:
        Single element list, or empty when absent or malformed
    """
    logger.debug("Trying to resolve version from %s", version_file)
    data = _load_toml(version_file)
    if data is None:
        return []

    version = _extract_value(data, ("project", "requires-python"))
    if version is None:
        version = _extract_value(data, ("tool", "poetry", "dependencies", "python"))

    versions = [version] if version is not None else []
    logger.info("Extracted %s from %s", versions, version_file)
    return versions


def get_version_input_from_tool_versions(version_file: str) -> ParsedVersionFile:
    """Extract python versions from an asdf/mise ``.tool-versions`` file.

    The first ``python`` line wins; every version listed on it is returned.
    """
    logger.debug("Trying to resolve version from %s", version_file)
    for line in _read_lines(version_file):
        fields = line.split("#", 1)[0].split()
        if len(fields) >= 2 and fields[0] == "python":
            return fields[1:]
    logger.warning("No Python version found in %s", version_file)
    return []


def get_version_input_from_pipfile(version_file: str) -> ParsedVersionFile:
    """Extract ``requires.python_version`` (or ``python_full_version``) from a Pipfile."""
    logger.debug("Trying to resolve version from %s", version_file)
    data = _load_toml(version_file)
    if data is None:
        return []
    for key in ("python_version", "python_full_version"):
        version = _extract_value(data, ("requires", key))
        if version is not None:
            logger.info("Extracted %s from %s", version, version_file)
            return [version]
    logger.warning("No Python version found in %s", version_file)
    return []


def detect_version_file_format(version_file: str) -> VersionFileFormat:
    """Classify a version file by its name."""
    name = os.path.basename(version_file)
    if name.endswith(Constants.TOML_SUFFIX):
        return VersionFileFormat.PYPROJECT
    if name == Constants.TOOL_VERSIONS_FILE:
        return VersionFileFormat.TOOL_VERSIONS
    if name == Constants.PIPFILE_FILE:
        return VersionFileFormat.PIPFILE
    return VersionFileFormat.PLAIN


_EXTRACTORS: Dict[VersionFileFormat, Callable[[str], ParsedVersionFile]] = {
    VersionFileFormat.PLAIN: get_versions_input_from_plain_file,
    VersionFileFormat.PYPROJECT: get_version_input_from_toml_file,
    VersionFileFormat.TOOL_VERSIONS: get_version_input_from_tool_versions,
    VersionFileFormat.PIPFILE: get_version_input_from_pipfile,
}


def get_version_input_from_file(version_file: str) -> ParsedVersionFile:
    """Parse any supported version file, dispatching on its name.

    Args:
        version_file: Path to the file

    Returns:
        List of version specifiers, possibly empty
    """
    return _EXTRACTORS[detect_version_file_format(version_file)](version_file)
