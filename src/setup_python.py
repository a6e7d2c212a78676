"""setup-python helpers - resolve versions and check cache availability.

    Returns:
        int: Exit code
"""
import logging
import sys

import requests

from args import parse_args
from caching.availability import is_cache_feature_available
from common.logging_utils import configure_logging, is_debug_enabled
from constants import ExitCodes
from repository.github import GitHubReleasesClient, ReleaseFetchError
from versioning.inputs import VersionFileNotFoundError, resolve_version_input
from versioning.validators import validate_python_version_format_for_pypy, validate_version

logger = logging.getLogger(__name__)

_VALIDATORS = {
    "pypy": validate_python_version_format_for_pypy,
    "semver": validate_version,
}


def list_releases(target):
    """Print the tag of every release of OWNER/REPO in API order."""
    owner, _, repo = target.partition("/")
    if not owner or not repo or "/" in repo:
        logger.error("Invalid repository %r, expected OWNER/REPO", target)
        return ExitCodes.INVALID_INPUT
    try:
        releases = GitHubReleasesClient().get_releases(owner, repo)
    except (ReleaseFetchError, requests.RequestException) as e:
        logger.error("%s", e)
        return ExitCodes.CONNECTION_ERROR
    for release in releases:
        print(release.get("tag_name") or release.get("name") or "")
    logger.info("Found %d releases in %s", len(releases), target)
    return ExitCodes.SUCCESS


def resolve_versions(versions, version_file, family=None):
    """Print the resolved versions, validating them for a runtime family if asked."""
    try:
        resolved = resolve_version_input(versions, version_file)
    except VersionFileNotFoundError as e:
        logger.error("%s", e)
        return ExitCodes.FILE_ERROR

    if family:
        invalid = [v for v in resolved if not _VALIDATORS[family](v)]
        if invalid:
            logger.error("Invalid %s version(s): %s", family, ", ".join(invalid))
            return ExitCodes.INVALID_INPUT

    for version in resolved:
        print(version)
    return ExitCodes.SUCCESS


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)
    if is_debug_enabled(logger):
        logger.debug("Parsed arguments: %s", vars(args))

    if args.RELEASES:
        code = list_releases(args.RELEASES)
    else:
        code = resolve_versions(args.PYTHON_VERSIONS, args.PYTHON_VERSION_FILE, args.VALIDATE)

    if code is ExitCodes.SUCCESS and args.CHECK_CACHE:
        available = is_cache_feature_available()
        print(f"cache-available={'true' if available else 'false'}")

    sys.exit(code.value)


if __name__ == "__main__":
    main()
