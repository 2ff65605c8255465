"""Sitemap sections for static pages, categories, and articles."""

from django.contrib.sitemaps import Sitemap
from django.urls import reverse
from django.utils import timezone

from articles.storage import get_storage


class StaticPageSitemap(Sitemap):
    # route name -> (changefreq, priority)
    pages = {
        "pages:home": ("daily", 1.0),
        "pages:search": ("weekly", 0.6),
        "pages:admin-panel": ("weekly", 0.4),
    }

    def items(self):
        return list(self.pages)

    def location(self, item):
        return reverse(item)

    def changefreq(self, item):
        return self.pages[item][0]

    def priority(self, item):
        return self.pages[item][1]

    def lastmod(self, item):
        return timezone.now()


class CategorySitemap(Sitemap):
    changefreq = "daily"
    priority = 0.8

    def items(self):
        return get_storage().list_categories()

    def location(self, item):
        return reverse("pages:category", args=[item.slug])

    def lastmod(self, item):
        return timezone.now()


class ArticleSitemap(Sitemap):
    changefreq = "weekly"
    priority = 0.7

    def items(self):
        return get_storage().list_articles()

    def location(self, item):
        return reverse("pages:article", args=[str(item.id)])

    def lastmod(self, item):
        return item.updated_at


SITEMAPS = {
    "static": StaticPageSitemap,
    "categories": CategorySitemap,
    "articles": ArticleSitemap,
}
