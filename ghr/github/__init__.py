"""GitHub release listing."""

from ghr.github.listing import (
    GitHubReleaseLister,
    ReleaseLister,
    StaticReleaseLister,
    parse_release,
)

__all__ = [
    "GitHubReleaseLister",
    "ReleaseLister",
    "StaticReleaseLister",
    "parse_release",
]
