"""Shared HTTP helpers used by the release clients.

Each call is a single request: there is no retrying or response caching.
Request exceptions propagate to the caller.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    """HTTP response reduced to what API callers consume."""
    status_code: int
    result: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


def get_json(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any
) -> ApiResponse:
    """Perform GET request and parse JSON response with DEBUG traces.

    Args:
        url: Target URL
        headers: Optional request headers
        **kwargs: Additional requests.get parameters

    Returns:
        ApiResponse with the parsed body in ``result`` (None when not JSON)
    """
    safe_target = safe_url(url)
    request_headers = {"Accept": "application/json"}
    request_headers.update(headers or {})

    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target
                )
            )
        response = requests.get(
            url,
            timeout=Constants.REQUEST_TIMEOUT,
            headers=request_headers,
            **kwargs
        )

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP response",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                status_code=response.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target
            )
        )

    result = None
    if response.text:
        try:
            result = json.loads(response.text)
        except json.JSONDecodeError:
            if is_debug_enabled(logger):
                logger.debug(
                    "JSON decode error",
                    extra=extra_context(
                        event="parse",
                        component="http_client",
                        action="get_json",
                        outcome="json_decode_error",
                        status_code=response.status_code,
                        target=safe_target
                    )
                )

    return ApiResponse(
        status_code=response.status_code,
        result=result,
        headers=dict(response.headers),
    )
