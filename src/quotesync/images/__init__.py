"""Author portrait search and hosting."""

from .resolver import ImageResolver
from .search import GoogleImageSearchClient
from .store import CloudflareImageStore

__all__ = [
    "CloudflareImageStore",
    "GoogleImageSearchClient",
    "ImageResolver",
]
