"""Tests for tools/http.py - HTTP client abstraction."""

import pytest

from ghr.core.result import Err, Ok
from ghr.tools.http import (
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
)


class TestHttpError:
    """Tests for HttpError dataclass."""

    def test_str_with_status(self) -> None:
        """String representation includes status code."""
        error = HttpError(url="https://api.github.com/repos/o/r/releases", status=403, message="Forbidden")
        assert str(error) == "HTTP 403: Forbidden (https://api.github.com/repos/o/r/releases)"

    def test_str_without_status(self) -> None:
        """Network errors have no status code."""
        error = HttpError(url="https://api.github.com", status=0, message="Request timed out")
        assert str(error) == "Request timed out (https://api.github.com)"

    def test_is_frozen(self) -> None:
        error = HttpError(url="https://api.github.com", status=404, message="Not Found")
        with pytest.raises(AttributeError):
            error.status = 500  # type: ignore[misc]


class TestMockHttpClient:
    """Tests for MockHttpClient."""

    def test_isinstance_check(self) -> None:
        """MockHttpClient implements HttpClient protocol."""
        assert isinstance(MockHttpClient(), HttpClient)

    def test_get_json_success(self) -> None:
        client = MockHttpClient()
        client.set_json("https://api.github.com/x", [{"id": 1}])

        result = client.get_json("https://api.github.com/x")

        assert isinstance(result, Ok)
        assert result.value == [{"id": 1}]

    def test_get_json_not_found(self) -> None:
        """Unknown URLs answer 404."""
        result = MockHttpClient().get_json("https://api.github.com/unknown")
        assert isinstance(result, Err)
        assert result.error.status == 404

    def test_get_json_error(self) -> None:
        client = MockHttpClient()
        error = HttpError(url="https://api.github.com/x", status=500, message="Server Error")
        client.set_json("https://api.github.com/x", error)

        result = client.get_json("https://api.github.com/x")

        assert isinstance(result, Err)
        assert result.error == error

    def test_records_calls(self) -> None:
        client = MockHttpClient()
        client.get_json("https://a")
        client.get_json("https://b")
        assert client.calls == ["https://a", "https://b"]


class TestRealHttpClient:
    """Tests for RealHttpClient (no network)."""

    def test_isinstance_check(self) -> None:
        assert isinstance(RealHttpClient(), HttpClient)

    def test_defaults(self) -> None:
        client = RealHttpClient()
        assert client.timeout == 30.0
        assert client.user_agent.startswith("ghr/")

    def test_invalid_url(self) -> None:
        """Malformed URLs are reported as errors, not raised."""
        result = RealHttpClient().get_json("not a url")
        assert isinstance(result, Err)
        assert result.error.status == 0
