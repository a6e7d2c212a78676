"""GitHub REST client for listing repository releases.

Used to enumerate every published release (e.g. GraalPy or PyPy builds)
when a version alias has to be resolved against the full release list.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import action_config
from common.http_client import ApiResponse, get_json
from common.pagination import iter_pages
from constants import Constants


class ReleaseFetchError(Exception):
    """Raised when a page of the release list cannot be retrieved."""

    def __init__(self, url: str, status_code: int):
        super().__init__(
            f"Unable to retrieve the list of available releases from '{url}' "
            f"(status {status_code})"
        )
        self.url = url
        self.status_code = status_code


class GitHubReleasesClient:
    """Lightweight REST client for GitHub release listings.

    Supports optional authentication via GITHUB_TOKEN environment variable.
    """

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None):
        """Initialize GitHub client.

        Args:
            base_url: Base URL for the REST API (defaults to GITHUB_API_URL or api.github.com)
            token: Personal access token (defaults to GITHUB_TOKEN env var)
        """
        self.base_url = (base_url or action_config.get_api_base_url()).rstrip("/")
        self.token = token or action_config.get_github_token()

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers including authorization if token is available."""
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def _fetch_page(self, url: str) -> ApiResponse:
        response = get_json(url, headers=self._get_headers())
        if response.status_code != 200 or not isinstance(response.result, list):
            raise ReleaseFetchError(url, response.status_code)
        return response

    def get_releases(self, owner: str, repo: str) -> List[Dict[str, Any]]:
        """Fetch all releases across every page.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Release dictionaries in the order the API returned them

        Raises:
            ReleaseFetchError: A page answered with a non-200 status or a non-list body
        """
        url = (
            f"{self.base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"
            f"/releases?per_page={Constants.REPO_API_PER_PAGE}"
        )
        releases: List[Dict[str, Any]] = []
        for page in iter_pages(self._fetch_page, url):
            releases.extend(page.result)
        return releases
