"""Article browsing package."""

from .browser import DEFAULT_SEARCH_FIELDS, ArticleBrowser
from .client import ArticleSourceProtocol, JsonPlaceholderClient

__all__ = [
    "ArticleBrowser",
    "ArticleSourceProtocol",
    "DEFAULT_SEARCH_FIELDS",
    "JsonPlaceholderClient",
]
