"""Storage contract shared by the database and in-memory backends.

Every API route and page goes through :class:`NewsStorage`. Implementations
must honour the same semantics:

- list operations return articles and comments newest first and categories
  ordered by name;
- lookups, updates and increments on a missing or malformed id return
  ``None`` instead of raising;
- deletes return ``True`` only when a row existed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence


class StorageError(Exception):
    """Base class for storage failures that callers are expected to handle."""


class DuplicateError(StorageError):
    """Raised when a write would violate a uniqueness constraint."""

    def __init__(self, field_name: str, value: Any):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name} {value!r} already exists")


TRUE_VALUES = ("true",)


def _coerce_flag(raw: Any) -> Optional[bool]:
    """Map a present query-string value to a bool; absent stays ``None``."""
    if raw is None or isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in TRUE_VALUES


def _clean_text(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


@dataclass(frozen=True)
class ArticleFilter:
    """Typed filter parameters for :meth:`NewsStorage.list_articles`."""

    query: Optional[str] = None
    category: Optional[str] = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    published: Optional[bool] = None
    featured: Optional[bool] = None

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> "ArticleFilter":
        """Defensively coerce raw query-string values into a filter.

        ``params`` may be a Django ``QueryDict`` (repeated ``tags`` keys are
        honoured) or a plain mapping. ``q`` is accepted as an alias for
        ``query``. Flags are ``True`` only for the literal ``true``.
        """
        getlist = getattr(params, "getlist", None)
        raw_tags: Iterable[Any]
        if getlist is not None:
            raw_tags = getlist("tags")
        else:
            value = params.get("tags")
            raw_tags = value if isinstance(value, (list, tuple)) else ([value] if value else [])

        tags: list[str] = []
        for chunk in raw_tags:
            for tag in str(chunk).split(","):
                tag = tag.strip()
                if tag and tag not in tags:
                    tags.append(tag)

        return cls(
            query=_clean_text(params.get("query")) or _clean_text(params.get("q")),
            category=_clean_text(params.get("category")),
            tags=tuple(tags),
            published=_coerce_flag(params.get("published")),
            featured=_coerce_flag(params.get("featured")),
        )

    def as_key(self) -> tuple:
        """Hashable representation used as a query cache key."""
        return (self.query, self.category, self.tags, self.published, self.featured)

    def matches(self, article: Any) -> bool:
        """Return True when ``article`` satisfies every populated criterion."""
        if self.query:
            needle = self.query.lower()
            haystacks = (article.title, article.content, article.author)
            if not any(needle in (value or "").lower() for value in haystacks):
                return False
        if self.category and (article.category or "").lower() != self.category.lower():
            return False
        if self.tags and not self.matches_tags(article):
            return False
        if self.published is not None and bool(article.published) != self.published:
            return False
        if self.featured is not None and bool(article.featured) != self.featured:
            return False
        return True

    def matches_tags(self, article: Any) -> bool:
        article_tags = article.tags or []
        return any(tag in article_tags for tag in self.tags)


class NewsStorage(ABC):
    """CRUD and filter operations for articles, comments, and categories."""

    name = "abstract"

    # Articles

    @abstractmethod
    def list_articles(self, params: Optional[ArticleFilter] = None) -> list:
        """Return articles matching ``params``, newest first."""

    @abstractmethod
    def get_article(self, article_id: str):
        """Return the article or ``None``."""

    @abstractmethod
    def create_article(self, data: Mapping[str, Any]):
        """Persist a new article with zeroed counters and return it."""

    @abstractmethod
    def update_article(self, article_id: str, data: Mapping[str, Any]):
        """Apply a partial update; ``None`` when the article is missing."""

    @abstractmethod
    def delete_article(self, article_id: str) -> bool:
        """Delete an article together with its comments."""

    @abstractmethod
    def increment_views(self, article_id: str):
        """Atomically add one view; return the updated article or ``None``."""

    @abstractmethod
    def increment_likes(self, article_id: str):
        """Atomically add one like; return the updated article or ``None``."""

    # Comments

    @abstractmethod
    def list_comments(self, article_id: str) -> list:
        """Return comments for an article, newest first."""

    @abstractmethod
    def create_comment(self, article_id: str, data: Mapping[str, Any]):
        """Attach a comment to an existing article; ``None`` if it is missing."""

    @abstractmethod
    def delete_comment(self, comment_id: str) -> bool:
        """Delete a single comment by id."""

    # Categories

    @abstractmethod
    def list_categories(self) -> list:
        """Return all categories ordered by name."""

    @abstractmethod
    def get_category(self, category_id: str):
        """Return the category or ``None``."""

    @abstractmethod
    def get_category_by_slug(self, slug: str):
        """Return the category with ``slug`` or ``None``."""

    @abstractmethod
    def create_category(self, data: Mapping[str, Any]):
        """Persist a new category; raises :class:`DuplicateError` on name/slug clashes."""

    @abstractmethod
    def update_category(self, category_id: str, data: Mapping[str, Any]):
        """Apply a partial update; ``None`` when the category is missing."""

    @abstractmethod
    def delete_category(self, category_id: str) -> bool:
        """Delete a category. Articles keep their category label."""


def unique_clash(existing: Sequence[Any], data: Mapping[str, Any], exclude_id: Any = None) -> Optional[str]:
    """Return the first of ``name``/``slug`` in ``data`` already used by another category."""
    for field_name in ("name", "slug"):
        value = data.get(field_name)
        if value is None:
            continue
        for category in existing:
            if str(category.id) == str(exclude_id):
                continue
            if getattr(category, field_name) == value:
                return field_name
    return None


__all__ = [
    "ArticleFilter",
    "DuplicateError",
    "NewsStorage",
    "StorageError",
    "unique_clash",
]
