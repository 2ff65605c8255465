"""In-process storage used when no database is configured."""

import itertools
import logging
import threading
import uuid
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

from django.utils import timezone

from .base import ArticleFilter, DuplicateError, NewsStorage, unique_clash

logger = logging.getLogger(__name__)


@dataclass
class ArticleRecord:
    id: str
    title: str
    content: str
    excerpt: str
    author: str
    author_title: str
    category: str
    author_image: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    image_url: Optional[str] = None
    published: bool = False
    featured: bool = False
    views: int = 0
    likes: int = 0
    created_at: datetime = field(default_factory=timezone.now)
    updated_at: datetime = field(default_factory=timezone.now)


@dataclass
class CommentRecord:
    id: str
    article_id: str
    author: str
    email: str
    content: str
    created_at: datetime = field(default_factory=timezone.now)


@dataclass
class CategoryRecord:
    id: str
    name: str
    slug: str
    color: str
    description: Optional[str] = None


def _snapshot(record):
    """Copy a record, including its tag list, so callers cannot reach the store."""
    if isinstance(record, ArticleRecord):
        return replace(record, tags=list(record.tags))
    return replace(record)


def _writable(record_cls, data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys the record does not define, plus identity and counters."""
    allowed = {f.name for f in fields(record_cls)} - {"id", "views", "likes", "created_at", "updated_at"}
    return {key: value for key, value in data.items() if key in allowed}


class MemoryStorage(NewsStorage):
    """Dict-backed storage with the same contract as :class:`DatabaseStorage`.

    All reads hand out copies, so callers never mutate stored records. Every
    mutation runs under a single lock, which makes the counter increments
    atomic within the process.
    """

    name = "memory"

    def __init__(self, seed: bool = False):
        self._lock = threading.Lock()
        self._sequence = itertools.count()
        self._order: dict[str, int] = {}
        self._articles: dict[str, ArticleRecord] = {}
        self._comments: dict[str, CommentRecord] = {}
        self._categories: dict[str, CategoryRecord] = {}
        if seed:
            self.seed()

    def seed(self) -> None:
        """Load the demo categories and articles."""
        from ..demo_data import DEMO_ARTICLES, DEMO_CATEGORIES

        for category in DEMO_CATEGORIES:
            self.create_category(category)
        now = timezone.now()
        # Oldest first so the first demo article ends up newest.
        for offset, article in reversed(list(enumerate(DEMO_ARTICLES))):
            stamp = now - timedelta(hours=offset)
            record = self.create_article(article)
            with self._lock:
                stored = self._articles[record.id]
                stored.views = article.get("views", 0)
                stored.likes = article.get("likes", 0)
                stored.created_at = stamp
                stored.updated_at = stamp
        logger.info(
            "Seeded memory storage with %d categories and %d articles",
            len(DEMO_CATEGORIES),
            len(DEMO_ARTICLES),
        )

    def _remember(self, record_id: str) -> None:
        self._order[record_id] = next(self._sequence)

    def _newest_first(self, records):
        return sorted(records, key=lambda r: (r.created_at, self._order.get(r.id, 0)), reverse=True)

    # Articles

    def list_articles(self, params: Optional[ArticleFilter] = None) -> list[ArticleRecord]:
        params = params or ArticleFilter()
        with self._lock:
            matched = [_snapshot(a) for a in self._articles.values() if params.matches(a)]
        return self._newest_first(matched)

    def get_article(self, article_id: str) -> Optional[ArticleRecord]:
        with self._lock:
            record = self._articles.get(str(article_id))
            return _snapshot(record) if record else None

    def create_article(self, data: Mapping[str, Any]) -> ArticleRecord:
        values = _writable(ArticleRecord, data)
        values["tags"] = list(values.get("tags") or [])
        now = timezone.now()
        record = ArticleRecord(id=str(uuid.uuid4()), created_at=now, updated_at=now, **values)
        with self._lock:
            self._articles[record.id] = record
            self._remember(record.id)
        logger.info("Created article %s (%s)", record.id, record.title)
        return _snapshot(record)

    def update_article(self, article_id: str, data: Mapping[str, Any]) -> Optional[ArticleRecord]:
        values = _writable(ArticleRecord, data)
        with self._lock:
            record = self._articles.get(str(article_id))
            if record is None:
                return None
            for key, value in values.items():
                setattr(record, key, list(value) if key == "tags" else value)
            record.updated_at = timezone.now()
            return _snapshot(record)

    def delete_article(self, article_id: str) -> bool:
        key = str(article_id)
        with self._lock:
            if self._articles.pop(key, None) is None:
                return False
            self._order.pop(key, None)
            orphaned = [c.id for c in self._comments.values() if c.article_id == key]
            for comment_id in orphaned:
                del self._comments[comment_id]
                self._order.pop(comment_id, None)
        logger.info("Deleted article %s", key)
        return True

    def increment_views(self, article_id: str) -> Optional[ArticleRecord]:
        return self._increment(article_id, "views")

    def increment_likes(self, article_id: str) -> Optional[ArticleRecord]:
        return self._increment(article_id, "likes")

    def _increment(self, article_id: str, field_name: str) -> Optional[ArticleRecord]:
        with self._lock:
            record = self._articles.get(str(article_id))
            if record is None:
                return None
            setattr(record, field_name, getattr(record, field_name) + 1)
            return _snapshot(record)

    # Comments

    def list_comments(self, article_id: str) -> list[CommentRecord]:
        key = str(article_id)
        with self._lock:
            matched = [_snapshot(c) for c in self._comments.values() if c.article_id == key]
        return self._newest_first(matched)

    def create_comment(self, article_id: str, data: Mapping[str, Any]) -> Optional[CommentRecord]:
        key = str(article_id)
        values = _writable(CommentRecord, data)
        values.pop("article_id", None)
        with self._lock:
            if key not in self._articles:
                return None
            record = CommentRecord(id=str(uuid.uuid4()), article_id=key, **values)
            self._comments[record.id] = record
            self._remember(record.id)
        logger.info("Created comment %s on article %s", record.id, key)
        return _snapshot(record)

    def delete_comment(self, comment_id: str) -> bool:
        key = str(comment_id)
        with self._lock:
            self._order.pop(key, None)
            return self._comments.pop(key, None) is not None

    # Categories

    def list_categories(self) -> list[CategoryRecord]:
        with self._lock:
            return sorted((_snapshot(c) for c in self._categories.values()), key=lambda c: c.name)

    def get_category(self, category_id: str) -> Optional[CategoryRecord]:
        with self._lock:
            record = self._categories.get(str(category_id))
            return _snapshot(record) if record else None

    def get_category_by_slug(self, slug: str) -> Optional[CategoryRecord]:
        with self._lock:
            for record in self._categories.values():
                if record.slug == slug:
                    return _snapshot(record)
        return None

    def create_category(self, data: Mapping[str, Any]) -> CategoryRecord:
        values = _writable(CategoryRecord, data)
        with self._lock:
            clash = unique_clash(list(self._categories.values()), values)
            if clash:
                raise DuplicateError(clash, values[clash])
            record = CategoryRecord(id=str(uuid.uuid4()), **values)
            self._categories[record.id] = record
        logger.info("Created category %s (%s)", record.slug, record.id)
        return _snapshot(record)

    def update_category(self, category_id: str, data: Mapping[str, Any]) -> Optional[CategoryRecord]:
        values = _writable(CategoryRecord, data)
        with self._lock:
            record = self._categories.get(str(category_id))
            if record is None:
                return None
            clash = unique_clash(list(self._categories.values()), values, exclude_id=record.id)
            if clash:
                raise DuplicateError(clash, values[clash])
            for key, value in values.items():
                setattr(record, key, value)
            return _snapshot(record)

    def delete_category(self, category_id: str) -> bool:
        with self._lock:
            return self._categories.pop(str(category_id), None) is not None


__all__ = ["ArticleRecord", "CategoryRecord", "CommentRecord", "MemoryStorage"]
