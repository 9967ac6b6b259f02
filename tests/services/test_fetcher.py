"""Tests for VerseFetcher service."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from terminal_bible.errors import FetchError
from terminal_bible.models import SingleVerse, VerseList
from terminal_bible.services.fetcher import VerseFetcher


def _response(payload=None, status_code=200, json_error=None):
    """Build a mocked requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error: Not Found for url", response=response
        )
    return response


class TestVerseFetcherInit:
    """Tests for VerseFetcher construction."""

    def test_strips_trailing_slash(self):
        """Trailing slash is stripped from base URL."""
        fetcher = VerseFetcher("https://bible-api.com/")
        assert fetcher.base_url == "https://bible-api.com"
        assert fetcher.timeout is None

    def test_build_url_percent_encodes_query(self):
        """Spaces, colons and slashes in the query are encoded."""
        fetcher = VerseFetcher("https://bible-api.com")

        assert fetcher.build_url("john 3:16") == "https://bible-api.com/john%203%3A16"
        assert fetcher.build_url("a/b") == "https://bible-api.com/a%2Fb"


class TestFetch:
    """Tests for VerseFetcher.fetch."""

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_single_verse(self, mock_get, single_verse_payload):
        """A response without a verses array is a SingleVerse."""
        mock_get.return_value = _response(single_verse_payload)

        passage = VerseFetcher("https://bible-api.com").fetch("john 3:16")

        assert isinstance(passage, SingleVerse)
        assert passage.reference == "John 3:16"
        assert passage.translation == "World English Bible"
        mock_get.assert_called_once_with("https://bible-api.com/john%203%3A16", timeout=None)

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_verse_list(self, mock_get, verse_list_payload):
        """A response with a verses array is a VerseList in response order."""
        mock_get.return_value = _response(verse_list_payload)

        passage = VerseFetcher("https://bible-api.com").fetch("1 thes 1:2-3")

        assert isinstance(passage, VerseList)
        assert [e.verse for e in passage.entries] == [2, 3]
        assert passage.entries[0].book_name == "1 Thessalonians"
        assert passage.to_verse().text.startswith("We always give thanks")

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_timeout_passed_through(self, mock_get, single_verse_payload):
        """Configured timeout is given to requests."""
        mock_get.return_value = _response(single_verse_payload)

        VerseFetcher("https://bible-api.com", timeout=5).fetch("john 3:16")

        assert mock_get.call_args.kwargs["timeout"] == 5

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_http_error_prefers_api_message(self, mock_get):
        """The service's error field is used as the message."""
        mock_get.return_value = _response({"error": "not found"}, status_code=404)

        with pytest.raises(FetchError) as exc_info:
            VerseFetcher("https://bible-api.com").fetch("hezekiah 1:1")

        assert exc_info.value.message == "not found"
        assert exc_info.value.status_code == 404

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_http_error_without_body_uses_transport_message(self, mock_get):
        """Without an error field the HTTP error text is used."""
        mock_get.return_value = _response(status_code=500, json_error=ValueError("no json"))

        with pytest.raises(FetchError, match="500 Client Error"):
            VerseFetcher("https://bible-api.com").fetch("john 3:16")

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_connection_error(self, mock_get):
        """Network failures become FetchError."""
        mock_get.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(FetchError, match="Connection refused"):
            VerseFetcher("https://bible-api.com").fetch("john 3:16")

    def test_invalid_base_url_is_not_reported_as_malformed(self):
        """A base URL without a scheme fails as a request error."""
        with pytest.raises(FetchError) as exc_info:
            VerseFetcher("not-a-url").fetch("john 3:16")

        assert "No scheme supplied" in exc_info.value.message
        assert "Malformed response" not in exc_info.value.message

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_unparsable_body(self, mock_get):
        """A non-JSON body becomes FetchError."""
        mock_get.return_value = _response(
            json_error=requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        )

        with pytest.raises(FetchError, match="Malformed response"):
            VerseFetcher("https://bible-api.com").fetch("john 3:16")

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_missing_fields(self, mock_get):
        """A JSON body without reference/text becomes FetchError."""
        mock_get.return_value = _response({"unexpected": True})

        with pytest.raises(FetchError, match="Malformed response"):
            VerseFetcher("https://bible-api.com").fetch("john 3:16")

    @patch("terminal_bible.services.fetcher.requests.get")
    def test_error_field_in_success_response(self, mock_get):
        """An error field in a 200 response is still an error."""
        mock_get.return_value = _response({"error": "invalid query"})

        with pytest.raises(FetchError, match="invalid query"):
            VerseFetcher("https://bible-api.com").fetch("???")
