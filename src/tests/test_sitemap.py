"""sitemap.xml structure and priorities."""

from __future__ import annotations

from xml.etree import ElementTree

from django.test import TestCase

from tests.utils import StorageTestMixin, make_article_payload, make_category_payload

NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


class SitemapTests(StorageTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.storage.create_category(make_category_payload())
        self.storage.create_category(make_category_payload(name="Sports", slug="sports"))
        self.article = self.storage.create_article(make_article_payload())
        self.storage.create_article(make_article_payload(title="Unpublished", published=False))

    def _entries(self):
        response = self.client.get("/sitemap.xml")
        self.assertEqual(response.status_code, 200)
        root = ElementTree.fromstring(response.content)
        return {
            url.find("sm:loc", NS).text: url for url in root.findall("sm:url", NS)
        }

    def test_one_entry_per_page_category_and_article(self):
        entries = self._entries()
        # Home, search, and the admin panel, plus every category and article.
        self.assertEqual(len(entries), 3 + 2 + 2)

    def test_priorities_and_change_frequencies(self):
        entries = self._entries()

        def meta(path):
            url = entries[f"http://testserver{path}"]
            return url.find("sm:changefreq", NS).text, url.find("sm:priority", NS).text

        self.assertEqual(meta("/"), ("daily", "1.0"))
        self.assertEqual(meta("/search"), ("weekly", "0.6"))
        self.assertEqual(meta("/admin/"), ("weekly", "0.4"))
        self.assertEqual(meta("/category/sports"), ("daily", "0.8"))
        self.assertEqual(meta(f"/article/{self.article.id}"), ("weekly", "0.7"))

    def test_article_lastmod_uses_update_date(self):
        entries = self._entries()
        lastmod = entries[f"http://testserver/article/{self.article.id}"].find("sm:lastmod", NS).text

        self.assertTrue(lastmod.startswith(self.article.updated_at.date().isoformat()))
