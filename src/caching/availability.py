"""Decide whether the Actions cache service may be used.

The capability probe and the server origin are both inputs so the gate
can be exercised without touching process-wide state.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Callable, Mapping, Optional
from urllib.parse import urlsplit

import action_config
from constants import Constants

logger = logging.getLogger(__name__)


class HostOrigin(Enum):
    """Where the workflow runs."""
    ENTERPRISE_SERVER = "enterprise-server"
    PUBLIC_CLOUD = "public-cloud"


def classify_host_origin(server_url: Optional[str] = None) -> HostOrigin:
    """Classify a server URL; None reads GITHUB_SERVER_URL at call time."""
    if server_url is None:
        server_url = action_config.get_server_url()
    try:
        hostname = urlsplit(server_url).hostname or ""
    except ValueError:
        hostname = ""
    if hostname.upper() == Constants.PUBLIC_HOSTNAME.upper():
        return HostOrigin.PUBLIC_CLOUD
    return HostOrigin.ENTERPRISE_SERVER


def actions_cache_service_available(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Default capability probe: the runner exports the cache service URL."""
    env = os.environ if environ is None else environ
    if env.get(Constants.ENV_CACHE_SERVICE_V2):
        return bool(env.get(Constants.ENV_RESULTS_URL))
    return bool(env.get(Constants.ENV_CACHE_URL))


def is_cache_feature_available(
    probe: Optional[Callable[[], bool]] = None,
    server_url: Optional[str] = None,
    warn: Optional[Callable[[str], None]] = None,
) -> bool:
    """Return True when cache operations should be attempted.

    Args:
        probe: Reports whether the cache service is reachable and enabled
        server_url: Server origin URL (defaults to GITHUB_SERVER_URL)
        warn: Sink for the warning emitted when caching is unavailable

    Returns:
        The probe's answer; a False answer also emits one warning
    """
    probe = probe or actions_cache_service_available
    if probe():
        return True

    warn = warn or logger.warning
    if classify_host_origin(server_url) is HostOrigin.ENTERPRISE_SERVER:
        warn(Constants.CACHE_WARNING_ENTERPRISE)
    else:
        warn(Constants.CACHE_WARNING_PUBLIC)
    return False
