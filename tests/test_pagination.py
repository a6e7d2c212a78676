"""Tests for Link header pagination."""

from unittest.mock import MagicMock

from common.http_client import ApiResponse
from common.pagination import get_next_page_url, iter_pages

BASE = "https://api.github.com/repositories/129883600/releases"


def _response(link):
    return {"statusCode": 200, "result": None, "headers": {"link": link}}


class TestGetNextPageUrl:
    """Test extraction of the next page URL."""

    def test_next_relation_found(self):
        """The rel="next" URL is returned."""
        link = f'<{BASE}?page=2>; rel="next", <{BASE}?page=3>; rel="last"'
        assert get_next_page_url(_response(link)) == f"{BASE}?page=2"

    def test_last_page_has_no_next(self):
        """Only prev/first relations means pagination ends."""
        link = f'<{BASE}?page=1>; rel="prev", <{BASE}?page=1>; rel="first"'
        assert get_next_page_url(_response(link)) is None

    def test_next_not_first_in_header(self):
        """The next entry is found wherever it appears."""
        link = f'<{BASE}?page=1>; rel="prev", <{BASE}?page=3>; rel="next"'
        assert get_next_page_url(_response(link)) == f"{BASE}?page=3"

    def test_api_response_with_capitalized_header(self):
        """Header lookup is case-insensitive on ApiResponse objects."""
        response = ApiResponse(200, [], {"Link": f'<{BASE}?page=2>; rel="next"'})
        assert get_next_page_url(response) == f"{BASE}?page=2"

    def test_missing_header(self):
        """No link header means no next page."""
        assert get_next_page_url({"statusCode": 200, "result": None, "headers": {}}) is None
        assert get_next_page_url({"statusCode": 200, "result": None}) is None
        assert get_next_page_url(ApiResponse(200)) is None

    def test_malformed_header(self):
        """Unparseable content is treated as the last page."""
        assert get_next_page_url(_response("garbage")) is None
        assert get_next_page_url(_response("<https://x>; rel")) is None
        assert get_next_page_url(_response("")) is None
        assert get_next_page_url(_response(None)) is None

    def test_parameter_value_containing_equals(self):
        """An earlier parameter with '=' in its value does not hide rel."""
        link = f'<{BASE}?page=2>; title="a=b"; rel="next", <{BASE}?page=3>; rel="last"'
        assert get_next_page_url(_response(link)) == f"{BASE}?page=2"

    def test_relation_must_be_exactly_next(self):
        """Relations merely containing the word are ignored."""
        assert get_next_page_url(_response(f'<{BASE}?page=2>; rel="nextish"')) is None


class TestIterPages:
    """Test the page driver loop."""

    def test_follows_links_in_order(self):
        """Each page is fetched once until no next link remains."""
        pages = {
            f"{BASE}?page=1": ApiResponse(200, [1], {"link": f'<{BASE}?page=2>; rel="next"'}),
            f"{BASE}?page=2": ApiResponse(200, [2], {"link": f'<{BASE}?page=3>; rel="next"'}),
            f"{BASE}?page=3": ApiResponse(200, [3], {"link": f'<{BASE}?page=2>; rel="prev"'}),
        }
        fetch = MagicMock(side_effect=lambda url: pages[url])

        results = [page.result for page in iter_pages(fetch, f"{BASE}?page=1")]

        assert results == [[1], [2], [3]]
        assert [c.args[0] for c in fetch.call_args_list] == [
            f"{BASE}?page=1", f"{BASE}?page=2", f"{BASE}?page=3",
        ]

    def test_no_start_url(self):
        """Nothing is fetched without a start URL."""
        fetch = MagicMock()
        assert list(iter_pages(fetch, None)) == []
        fetch.assert_not_called()
