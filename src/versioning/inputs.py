"""Resolve the requested versions from explicit inputs or a version file."""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Sequence

from constants import Constants
from .version_file import get_version_input_from_file

logger = logging.getLogger(__name__)


class VersionFileNotFoundError(FileNotFoundError):
    """Raised when an explicitly requested version file is missing."""

    def __init__(self, version_file: str):
        super().__init__(f"The specified python version file at: {version_file} doesn't exist.")
        self.version_file = version_file


def resolve_version_input(
    versions: Optional[Sequence[str]] = None,
    version_file: Optional[str] = None,
    *,
    cwd: Optional[str] = None,
) -> List[str]:
    """Return the version specifiers to install.

    Explicit versions win over a version file. With neither given, a
    ``.python-version`` file in ``cwd`` is used when present.

    Args:
        versions: Explicit version inputs (blank entries ignored)
        version_file: Path to a version file
        cwd: Directory searched for the default version file

    Returns:
        List of version specifiers, possibly empty

    Raises:
        VersionFileNotFoundError: version_file was given but does not exist
    """
    explicit = [v.strip() for v in (versions or []) if v and v.strip()]

    if explicit:
        if version_file:
            logger.warning(
                "Both python-version and python-version-file inputs are specified, "
                "only python-version will be used."
            )
        return explicit

    if version_file:
        if not os.path.exists(version_file):
            raise VersionFileNotFoundError(version_file)
        return get_version_input_from_file(version_file)

    default_file = os.path.join(cwd or os.getcwd(), Constants.DEFAULT_VERSION_FILE)
    if os.path.exists(default_file):
        logger.info("Using %s as the version file", default_file)
        return get_version_input_from_file(default_file)

    logger.warning(
        "Neither python-version nor python-version-file inputs were specified "
        "and no %s file was found.",
        Constants.DEFAULT_VERSION_FILE,
    )
    return []
