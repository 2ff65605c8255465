"""Template context shared by every page."""

from .queries import get_queries

NAV_CATEGORY_LIMIT = 6


def site_navigation(request):
    """Header and footer category links, fetched only if a template asks."""
    return {
        "nav_categories": lambda: get_queries(request).categories()[:NAV_CATEGORY_LIMIT],
    }
