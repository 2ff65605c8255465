"""Django ORM implementation of the storage contract."""

import logging
import uuid
from typing import Any, Mapping, Optional

from django.db import IntegrityError, transaction
from django.db.models import F, Q

from ..models import Article, Category, Comment
from .base import ArticleFilter, DuplicateError, NewsStorage, unique_clash

logger = logging.getLogger(__name__)


def _parse_id(value: Any) -> Optional[uuid.UUID]:
    """Return a UUID for ``value`` or ``None`` when it is malformed."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class DatabaseStorage(NewsStorage):
    """Persistent storage backed by the configured Django database."""

    name = "database"

    # Articles

    def list_articles(self, params: Optional[ArticleFilter] = None) -> list[Article]:
        params = params or ArticleFilter()
        queryset = Article.objects.all()
        if params.query:
            queryset = queryset.filter(
                Q(title__icontains=params.query)
                | Q(content__icontains=params.query)
                | Q(author__icontains=params.query)
            )
        if params.category:
            queryset = queryset.filter(category__iexact=params.category)
        if params.published is not None:
            queryset = queryset.filter(published=params.published)
        if params.featured is not None:
            queryset = queryset.filter(featured=params.featured)

        articles = list(queryset.order_by("-created_at"))
        if params.tags:
            # JSON containment lookups are not portable to SQLite.
            articles = [article for article in articles if params.matches_tags(article)]
        return articles

    def get_article(self, article_id: str) -> Optional[Article]:
        pk = _parse_id(article_id)
        if pk is None:
            return None
        return Article.objects.filter(pk=pk).first()

    def create_article(self, data: Mapping[str, Any]) -> Article:
        article = Article.objects.create(**dict(data), views=0, likes=0)
        logger.info("Created article %s (%s)", article.pk, article.title)
        return article

    def update_article(self, article_id: str, data: Mapping[str, Any]) -> Optional[Article]:
        article = self.get_article(article_id)
        if article is None:
            return None
        for key, value in data.items():
            setattr(article, key, value)
        # Counters are only written by _increment; saving them here could roll back
        # views or likes recorded since this row was read.
        article.save(update_fields=[*data.keys(), "updated_at"])
        return Article.objects.get(pk=article.pk)

    def delete_article(self, article_id: str) -> bool:
        pk = _parse_id(article_id)
        if pk is None:
            return False
        with transaction.atomic():
            if not Article.objects.filter(pk=pk).exists():
                return False
            Article.objects.filter(pk=pk).delete()
        logger.info("Deleted article %s", pk)
        return True

    def increment_views(self, article_id: str) -> Optional[Article]:
        return self._increment(article_id, "views")

    def increment_likes(self, article_id: str) -> Optional[Article]:
        return self._increment(article_id, "likes")

    def _increment(self, article_id: str, field_name: str) -> Optional[Article]:
        """Issue a single ``UPDATE ... SET field = field + 1`` statement."""
        pk = _parse_id(article_id)
        if pk is None:
            return None
        updated = Article.objects.filter(pk=pk).update(**{field_name: F(field_name) + 1})
        if not updated:
            return None
        return Article.objects.filter(pk=pk).first()

    # Comments

    def list_comments(self, article_id: str) -> list[Comment]:
        pk = _parse_id(article_id)
        if pk is None:
            return []
        return list(Comment.objects.filter(article_id=pk).order_by("-created_at"))

    def create_comment(self, article_id: str, data: Mapping[str, Any]) -> Optional[Comment]:
        article = self.get_article(article_id)
        if article is None:
            return None
        comment = Comment.objects.create(article=article, **dict(data))
        logger.info("Created comment %s on article %s", comment.pk, article.pk)
        return comment

    def delete_comment(self, comment_id: str) -> bool:
        pk = _parse_id(comment_id)
        if pk is None:
            return False
        deleted, _ = Comment.objects.filter(pk=pk).delete()
        return deleted > 0

    # Categories

    def list_categories(self) -> list[Category]:
        return list(Category.objects.order_by("name"))

    def get_category(self, category_id: str) -> Optional[Category]:
        pk = _parse_id(category_id)
        if pk is None:
            return None
        return Category.objects.filter(pk=pk).first()

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return Category.objects.filter(slug=slug).first()

    def create_category(self, data: Mapping[str, Any]) -> Category:
        self._check_unique(data)
        try:
            with transaction.atomic():
                category = Category.objects.create(**dict(data))
        except IntegrityError as exc:
            raise self._duplicate_from(exc, data) from exc
        logger.info("Created category %s (%s)", category.slug, category.pk)
        return category

    def update_category(self, category_id: str, data: Mapping[str, Any]) -> Optional[Category]:
        category = self.get_category(category_id)
        if category is None:
            return None
        self._check_unique(data, exclude_id=category.pk)
        for key, value in data.items():
            setattr(category, key, value)
        try:
            with transaction.atomic():
                category.save()
        except IntegrityError as exc:
            raise self._duplicate_from(exc, data, exclude_id=category.pk) from exc
        return category

    def delete_category(self, category_id: str) -> bool:
        pk = _parse_id(category_id)
        if pk is None:
            return False
        deleted, _ = Category.objects.filter(pk=pk).delete()
        return deleted > 0

    @staticmethod
    def _check_unique(data: Mapping[str, Any], exclude_id: Any = None) -> None:
        lookup = Q()
        for field_name in ("name", "slug"):
            if data.get(field_name) is not None:
                lookup |= Q(**{field_name: data[field_name]})
        if not lookup:
            return
        candidates = Category.objects.filter(lookup)
        clash = unique_clash(list(candidates), data, exclude_id=exclude_id)
        if clash:
            raise DuplicateError(clash, data[clash])

    @classmethod
    def _duplicate_from(cls, exc: IntegrityError, data: Mapping[str, Any], exclude_id: Any = None) -> DuplicateError:
        """Name the field a lost uniqueness race clashed on."""
        try:
            cls._check_unique(data, exclude_id=exclude_id)
        except DuplicateError as duplicate:
            return duplicate
        field_name = "slug" if "slug" in str(exc).lower() else "name"
        return DuplicateError(field_name, data.get(field_name))


__all__ = ["DatabaseStorage"]
