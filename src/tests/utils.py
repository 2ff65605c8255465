"""Shared helpers for tests (payload builders, storage patching)."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List
from unittest import mock

from django.utils import timezone

from articles.models import Article
from articles.storage import DatabaseStorage, MemoryStorage, NewsStorage

# Every module that resolves the storage through ``get_storage``.
STORAGE_LOOKUPS = [
    "articles.views.get_storage",
    "pages.queries.get_storage",
    "pages.sitemaps.get_storage",
]


def make_article_payload(**overrides) -> Dict[str, Any]:
    """Return a valid article body; keyword arguments replace single fields."""

    payload: Dict[str, Any] = {
        "title": "City Council Approves New Bike Lanes",
        "content": "The council voted on Tuesday to extend the bike lane network downtown.",
        "excerpt": "Downtown gets more bike lanes.",
        "author": "Jane Reporter",
        "author_title": "Metro Desk",
        "author_image": None,
        "category": "Technology",
        "tags": ["Cities", "Transport"],
        "image_url": None,
        "published": True,
        "featured": False,
    }
    payload.update(overrides)
    return payload


def make_category_payload(**overrides) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": "Technology",
        "slug": "technology",
        "description": "Latest tech news",
        "color": "bg-blue-100 text-blue-700",
    }
    payload.update(overrides)
    return payload


def backdate(storage: NewsStorage, article_id: Any, hours: int) -> None:
    """Move an article's ``created_at`` ``hours`` into the past."""

    stamp = timezone.now() - timedelta(hours=hours)
    if isinstance(storage, DatabaseStorage):
        Article.objects.filter(pk=article_id).update(created_at=stamp)
    else:
        # Tests may reach into the record store directly.
        storage._articles[str(article_id)].created_at = stamp


class StorageTestMixin:
    """Run a TestCase against a fresh, unseeded storage.

    Subclasses pick the backend with ``storage_class``; the instance is
    patched into every ``get_storage`` lookup for the duration of a test.
    """

    storage_class = MemoryStorage

    def setUp(self):
        super().setUp()
        self.storage: NewsStorage = self.storage_class()
        patchers: List[Any] = [
            mock.patch(target, return_value=self.storage) for target in STORAGE_LOOKUPS
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)
