"""Transport helpers used by the release-listing provider."""

from ghr.tools.http import (
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
)

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
]
