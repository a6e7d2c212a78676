"""Environment derived settings for the action.

Values are read at call time so callers (and tests) can change the
environment between calls without reloading anything.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from constants import Constants


def _env(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def get_server_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the server origin URL, defaulting to the public service."""
    value = _env(environ).get(Constants.ENV_GITHUB_SERVER_URL)
    return value.strip() if value and value.strip() else Constants.PUBLIC_SERVER_URL


def get_api_base_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the REST API base URL without a trailing slash."""
    value = _env(environ).get(Constants.ENV_GITHUB_API_URL)
    if value and value.strip():
        return value.strip().rstrip("/")
    return Constants.GITHUB_API_BASE


def get_github_token(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the API token from GITHUB_TOKEN, or None when unset/blank."""
    value = _env(environ).get(Constants.ENV_GITHUB_TOKEN)
    if value and value.strip():
        return value.strip()
    return None
