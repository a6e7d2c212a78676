"""Link header pagination for REST APIs.

``get_next_page_url`` inspects a single response; ``iter_pages`` is the
driver loop that issues one request per page until no ``next`` link is
left.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from requests.structures import CaseInsensitiveDict

from common.http_client import ApiResponse
from common.logging_utils import is_debug_enabled, safe_url

logger = logging.getLogger(__name__)

# Entries are separated by commas that start a new <url>
_LINK_ENTRY = re.compile(r",\s*(?=<)")
_LINK_VALUE = re.compile(r"<([^>]*)>(.*)", re.DOTALL)


def _link_params(raw: str) -> Dict[str, str]:
    """Parse ``; key="value"`` parameters, keeping ``=`` inside values."""
    params: Dict[str, str] = {}
    for param in raw.split(";"):
        key, sep, value = param.partition("=")
        key = key.strip().lower()
        if sep and key:
            params.setdefault(key, value.strip().strip('"\''))
    return params


def _response_headers(response: Any) -> Mapping[str, Any]:
    if isinstance(response, Mapping):
        headers = response.get("headers")
    else:
        headers = getattr(response, "headers", None)
    return headers if isinstance(headers, Mapping) else {}


def get_next_page_url(response: Any) -> Optional[str]:
    """Return the ``rel="next"`` URL of a response's Link header.

    Args:
        response: ApiResponse, or a mapping with a ``headers`` entry

    Returns:
        Next page URL, or None on the last page or a missing/malformed header
    """
    link_header = CaseInsensitiveDict(_response_headers(response)).get("link")
    if not isinstance(link_header, str) or not link_header.strip():
        return None

    for entry in _LINK_ENTRY.split(link_header.strip()):
        match = _LINK_VALUE.match(entry.strip())
        if not match:
            continue
        url = match.group(1).strip()
        if url and "next" in _link_params(match.group(2)).get("rel", "").split():
            return url
    return None


def iter_pages(
    fetch: Callable[[str], ApiResponse],
    url: Optional[str],
) -> Iterator[ApiResponse]:
    """Yield each page response, following ``next`` links in request order.

    Args:
        fetch: Performs one request for a URL
        url: First page URL
    """
    while url:
        if is_debug_enabled(logger):
            logger.debug("Fetching page %s", safe_url(url))
        response = fetch(url)
        yield response
        url = get_next_page_url(response)
