"""Per-request query cache in front of the storage.

Reads are keyed the same way as the REST endpoints they mirror, e.g.
``("/api/articles", filter_key)`` or ``("/api/articles", id, "comments")``,
so a mutation can drop every entry under a prefix with :meth:`invalidate`.
"""

import logging
from typing import Any, Callable, Optional

from articles.storage import ArticleFilter, NewsStorage, get_storage

logger = logging.getLogger(__name__)

ARTICLES = "/api/articles"
CATEGORIES = "/api/categories"


class QueryCache:
    def __init__(self, storage: NewsStorage):
        self.storage = storage
        self._entries: dict[tuple, Any] = {}

    def _fetch(self, key: tuple, loader: Callable[[], Any]) -> Any:
        if key not in self._entries:
            self._entries[key] = loader()
        return self._entries[key]

    def articles(self, params: Optional[ArticleFilter] = None) -> list:
        params = params or ArticleFilter()
        return self._fetch((ARTICLES, params.as_key()), lambda: self.storage.list_articles(params))

    def article(self, article_id: str):
        return self._fetch((ARTICLES, str(article_id)), lambda: self.storage.get_article(article_id))

    def record_view(self, article_id: str):
        """Count one view and cache the refreshed article."""
        article = self.storage.increment_views(article_id)
        self._entries[(ARTICLES, str(article_id))] = article
        return article

    def comments(self, article_id: str) -> list:
        return self._fetch(
            (ARTICLES, str(article_id), "comments"), lambda: self.storage.list_comments(article_id)
        )

    def categories(self) -> list:
        return self._fetch((CATEGORIES,), self.storage.list_categories)

    def category(self, slug: str):
        return self._fetch((CATEGORIES, slug), lambda: self.storage.get_category_by_slug(slug))

    def invalidate(self, *prefix: Any) -> int:
        """Drop every cached entry whose key starts with ``prefix``."""
        stale = [key for key in self._entries if key[: len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]
        logger.debug("Invalidated %d cached queries under %r", len(stale), prefix)
        return len(stale)


def get_queries(request) -> QueryCache:
    """Return the query cache attached to ``request``, creating it on first use."""
    queries = getattr(request, "_news_queries", None)
    if queries is None:
        queries = QueryCache(get_storage())
        request._news_queries = queries
    return queries


__all__ = ["ARTICLES", "CATEGORIES", "QueryCache", "get_queries"]
