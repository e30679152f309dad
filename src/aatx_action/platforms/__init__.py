from .base import ReviewPlatform
from .github import GitHubClient

__all__ = ["ReviewPlatform", "GitHubClient"]
