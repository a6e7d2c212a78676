"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    INVALID_INPUT = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    # Version files
    DEFAULT_VERSION_FILE = ".python-version"
    TOML_SUFFIX = ".toml"
    TOOL_VERSIONS_FILE = ".tool-versions"
    PIPFILE_FILE = "Pipfile"
    NIGHTLY_KEYWORD = "nightly"

    # GitHub API / server
    PUBLIC_SERVER_URL = "https://github.com"
    PUBLIC_HOSTNAME = "github.com"
    GITHUB_API_BASE = "https://api.github.com"
    REPO_API_PER_PAGE = 100

    # Environment variables
    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
    ENV_GITHUB_SERVER_URL = "GITHUB_SERVER_URL"
    ENV_GITHUB_API_URL = "GITHUB_API_URL"
    ENV_GITHUB_ACTIONS = "GITHUB_ACTIONS"
    ENV_CACHE_URL = "ACTIONS_CACHE_URL"
    ENV_RESULTS_URL = "ACTIONS_RESULTS_URL"
    ENV_CACHE_SERVICE_V2 = "ACTIONS_CACHE_SERVICE_V2"
    ENV_LOG_LEVEL = "SETUP_PYTHON_LOG_LEVEL"

    # Cache warnings
    CACHE_WARNING_ENTERPRISE = (
        "Caching is only supported on GHES version >= 3.5. If you are on a "
        "version >= 3.5, please check with your GHES admin if the Actions "
        "cache service is enabled or not."
    )
    CACHE_WARNING_PUBLIC = (
        "The runner was not able to contact the cache service. Caching will be skipped"
    )
