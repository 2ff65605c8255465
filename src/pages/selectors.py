"""View-state derivation over fetched article lists.

Everything here is pure in-memory filtering and sorting; nothing touches the
storage.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

WORDS_PER_MINUTE = 200


@dataclass
class FrontPage:
    hero: Optional[Any] = None
    secondary: list = field(default_factory=list)
    regular: list = field(default_factory=list)


@dataclass
class CategorySection:
    category: Any
    lead: Any
    side: list


def split_featured(articles: Sequence[Any]) -> FrontPage:
    """Hero is the newest featured article, followed by up to three more."""
    featured = [a for a in articles if a.featured]
    return FrontPage(
        hero=featured[0] if featured else None,
        secondary=featured[1:4],
        regular=[a for a in articles if not a.featured],
    )


def trending(articles: Sequence[Any], limit: int = 5) -> list:
    """Most viewed first; ties keep their incoming (newest first) order."""
    return sorted(articles, key=lambda a: a.views or 0, reverse=True)[:limit]


def related_articles(current: Any, candidates: Sequence[Any], max_results: int = 4) -> list:
    """Articles sharing the category or at least one tag with ``current``.

    Same-category matches rank first, then newest first within each group.
    """
    current_tags = set(current.tags or [])

    def is_related(article) -> bool:
        if str(article.id) == str(current.id):
            return False
        if article.category == current.category:
            return True
        return bool(current_tags.intersection(article.tags or []))

    related = [a for a in candidates if is_related(a)]
    related.sort(key=lambda a: a.created_at, reverse=True)
    related.sort(key=lambda a: a.category == current.category, reverse=True)
    return related[:max_results]


def category_sections(
    categories: Sequence[Any], articles: Sequence[Any], limit: int = 4, per_section: int = 5
) -> list[CategorySection]:
    """Front-page blocks for the first ``limit`` categories with content.

    Featured articles are left out since they already lead the page.
    """
    sections = []
    for category in categories[:limit]:
        name = category.name.lower()
        matched = [a for a in articles if a.category.lower() == name and not a.featured][:per_section]
        if matched:
            sections.append(CategorySection(category=category, lead=matched[0], side=matched[1:]))
    return sections


def category_lead(articles: Sequence[Any]) -> tuple[Optional[Any], list]:
    """First featured article (or the newest) and everything else."""
    if not articles:
        return None, []
    lead = next((a for a in articles if a.featured), articles[0])
    return lead, [a for a in articles if a.id != lead.id]


def split_published(articles: Sequence[Any]) -> tuple[list, list]:
    return [a for a in articles if a.published], [a for a in articles if not a.published]


def reading_time(content: str) -> int:
    """Whole minutes to read ``content``, never less than one."""
    words = len((content or "").split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


__all__ = [
    "CategorySection",
    "FrontPage",
    "category_lead",
    "category_sections",
    "reading_time",
    "related_articles",
    "split_featured",
    "split_published",
    "trending",
]
