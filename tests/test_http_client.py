"""Tests for the JSON HTTP helper."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from common.http_client import ApiResponse, get_json


def _mock_response(status_code=200, text="", headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.headers = headers or {}
    return response


class TestGetJson:
    """Test get_json response handling."""

    @patch('common.http_client.requests.get')
    def test_parses_json_and_headers(self, mock_get):
        """Body, status and headers end up in the ApiResponse."""
        mock_get.return_value = _mock_response(
            200, '[{"tag_name": "v1"}]', {"Link": '<https://x?page=2>; rel="next"'}
        )

        result = get_json("https://api.example.com/releases", headers={"Authorization": "token t"})

        assert result == ApiResponse(
            200, [{"tag_name": "v1"}], {"Link": '<https://x?page=2>; rel="next"'}
        )
        sent_headers = mock_get.call_args.kwargs["headers"]
        assert sent_headers["Authorization"] == "token t"
        assert sent_headers["Accept"] == "application/json"

    @patch('common.http_client.requests.get')
    def test_non_json_body(self, mock_get):
        """A body that is not JSON gives result None."""
        mock_get.return_value = _mock_response(502, "<html>bad gateway</html>")

        result = get_json("https://api.example.com/releases")

        assert result.status_code == 502
        assert result.result is None

    @patch('common.http_client.requests.get')
    def test_single_attempt_and_errors_propagate(self, mock_get):
        """Connection errors are not retried or swallowed."""
        mock_get.side_effect = requests.ConnectionError("boom")

        with pytest.raises(requests.ConnectionError):
            get_json("https://api.example.com/releases")
        assert mock_get.call_count == 1
