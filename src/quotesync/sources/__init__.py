"""Quotes dataset sources."""

from .github import GitHubContentFetcher

__all__ = [
    "GitHubContentFetcher",
]
