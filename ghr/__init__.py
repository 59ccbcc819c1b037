"""ghr - GitHub release check resource."""

__version__ = "0.1.0"
