"""REST API tests for articles, comments, categories, and search."""

from __future__ import annotations

from unittest import mock

from django.db import DatabaseError
from django.test import TestCase
from rest_framework.test import APIClient

from articles.storage import DatabaseStorage
from tests.utils import StorageTestMixin, backdate, make_article_payload, make_category_payload

MISSING_ID = "00000000-0000-0000-0000-000000000000"


class ArticleApiTests(StorageTestMixin, TestCase):
    """Article endpoints against the in-memory backend."""

    def setUp(self):
        """Fresh storage and DRF APIClient per test."""
        super().setUp()
        self.api_client: APIClient = APIClient()

    def _create(self, **overrides):
        response = self.api_client.post(
            "/api/articles", make_article_payload(**overrides), format="json"
        )
        self.assertEqual(response.status_code, 201, response.content)
        return response.json()["data"]

    def test_create_article_returns_enveloped_201(self):
        """Create succeeds, counters start at zero, and client counters are ignored."""
        response = self.api_client.post(
            "/api/articles", make_article_payload(views=500, likes=20), format="json"
        )

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["errors"], [])
        self.assertEqual(body["data"]["views"], 0)
        self.assertEqual(body["data"]["likes"], 0)
        self.assertEqual(body["data"]["tags"], ["Cities", "Transport"])
        self.assertTrue(body["data"]["id"])

    def test_create_article_missing_fields_returns_400(self):
        payload = make_article_payload()
        del payload["title"]
        del payload["author"]

        response = self.api_client.post("/api/articles", payload, format="json")

        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertIsNone(body["data"])
        self.assertIn("title", body["errors"][0])
        self.assertIn("author", body["errors"][0])
        self.assertEqual(self.storage.list_articles(), [])

    def test_create_article_empty_urls_are_stored_as_null(self):
        data = self._create(author_image="", image_url="")
        self.assertIsNone(data["author_image"])
        self.assertIsNone(data["image_url"])

    def test_blank_and_repeated_tags_are_dropped(self):
        data = self._create(tags=["  AI ", "", "   ", "AI", "Markets"])
        self.assertEqual(data["tags"], ["AI", "Markets"])

    def test_unknown_article_returns_404(self):
        for path in (
            f"/api/articles/{MISSING_ID}",
            "/api/articles/not-a-uuid",
            f"/api/articles/{MISSING_ID}/comments",
        ):
            with self.subTest(path=path):
                response = self.api_client.get(path)
                self.assertEqual(response.status_code, 404)
                self.assertEqual(response.json()["errors"], ["Article not found"])

        self.assertEqual(self.api_client.post(f"/api/articles/{MISSING_ID}/like").status_code, 404)
        self.assertEqual(self.api_client.post(f"/api/articles/{MISSING_ID}/views").status_code, 404)
        self.assertEqual(
            self.api_client.put(f"/api/articles/{MISSING_ID}", {"title": "x"}, format="json").status_code,
            404,
        )
        self.assertEqual(self.api_client.delete(f"/api/articles/{MISSING_ID}").status_code, 404)

    def test_each_get_counts_one_view(self):
        article = self._create()

        first = self.api_client.get(f"/api/articles/{article['id']}").json()["data"]
        second = self.api_client.get(f"/api/articles/{article['id']}").json()["data"]

        self.assertEqual(first["views"], 1)
        self.assertEqual(second["views"], 2)

    def test_views_endpoint_returns_new_count(self):
        article = self._create()

        response = self.api_client.post(f"/api/articles/{article['id']}/views")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"], {"views": 1})

    def test_two_likes_add_two(self):
        article = self._create()

        self.api_client.post(f"/api/articles/{article['id']}/like")
        response = self.api_client.post(f"/api/articles/{article['id']}/like")

        self.assertEqual(response.json()["data"], {"likes": 2})
        self.assertEqual(self.storage.get_article(article["id"]).likes, 2)

    def test_update_is_partial(self):
        article = self._create(featured=True)

        response = self.api_client.put(
            f"/api/articles/{article['id']}", {"title": "Updated headline"}, format="json"
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["title"], "Updated headline")
        self.assertTrue(data["featured"])
        self.assertEqual(data["author"], "Jane Reporter")

    def test_delete_article_returns_204(self):
        article = self._create()

        response = self.api_client.delete(f"/api/articles/{article['id']}")

        self.assertEqual(response.status_code, 204)
        self.assertIsNone(self.storage.get_article(article["id"]))

    def test_list_filters_by_category_and_published_newest_first(self):
        old = self._create(title="Old tech", category="Technology")
        new = self._create(title="New tech", category="Technology")
        self._create(title="Draft tech", category="Technology", published=False)
        self._create(title="Sport", category="Sports")
        backdate(self.storage, old["id"], hours=3)
        backdate(self.storage, new["id"], hours=1)

        response = self.api_client.get("/api/articles", {"category": "Technology", "published": "true"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual([a["title"] for a in response.json()["data"]], ["New tech", "Old tech"])

    def test_list_flag_values_other_than_true_mean_false(self):
        self._create(title="Live")
        self._create(title="Draft", published=False)

        response = self.api_client.get("/api/articles", {"published": "yes"})

        self.assertEqual([a["title"] for a in response.json()["data"]], ["Draft"])

    def test_list_filters_by_repeated_or_comma_separated_tags(self):
        self._create(title="AI", tags=["AI"])
        self._create(title="Markets", tags=["Markets"])
        self._create(title="Other", tags=["Other"])

        repeated = self.api_client.get("/api/articles?tags=AI&tags=Markets").json()["data"]
        commas = self.api_client.get("/api/articles?tags=AI,Markets").json()["data"]

        self.assertEqual({a["title"] for a in repeated}, {"AI", "Markets"})
        self.assertEqual({a["title"] for a in commas}, {"AI", "Markets"})

    def test_search_matches_query_and_rejects_writes(self):
        self._create(title="Quantum leap in computing")
        self._create(title="Local elections")

        response = self.api_client.get("/api/search", {"query": "quantum"})

        self.assertEqual([a["title"] for a in response.json()["data"]], ["Quantum leap in computing"])
        self.assertEqual(
            self.api_client.post("/api/search", make_article_payload(), format="json").status_code, 405
        )


class CommentApiTests(StorageTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.api_client: APIClient = APIClient()
        self.article = self.storage.create_article(make_article_payload())
        self.comment_body = {"author": "Ann", "email": "ann@example.com", "content": "Great piece"}

    def test_two_comments_minus_one_leaves_one(self):
        path = f"/api/articles/{self.article.id}/comments"
        first = self.api_client.post(path, self.comment_body, format="json")
        second = self.api_client.post(path, self.comment_body, format="json")
        self.assertEqual(first.status_code, 201)
        self.assertEqual(first.json()["data"]["article_id"], str(self.article.id))

        deleted = self.api_client.delete(f"/api/comments/{second.json()['data']['id']}")
        remaining = self.api_client.get(path).json()["data"]

        self.assertEqual(deleted.status_code, 204)
        self.assertEqual([c["id"] for c in remaining], [first.json()["data"]["id"]])

    def test_comment_requires_valid_email(self):
        response = self.api_client.post(
            f"/api/articles/{self.article.id}/comments",
            {**self.comment_body, "email": "not-an-email"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.json()["errors"][0])

    def test_comment_on_missing_article_returns_404(self):
        response = self.api_client.post(
            f"/api/articles/{MISSING_ID}/comments", self.comment_body, format="json"
        )
        self.assertEqual(response.status_code, 404)

    def test_delete_unknown_comment_returns_404(self):
        self.assertEqual(self.api_client.delete(f"/api/comments/{MISSING_ID}").status_code, 404)


class CategoryApiTests(StorageTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.api_client: APIClient = APIClient()

    def test_create_derives_slug_and_default_color(self):
        response = self.api_client.post("/api/categories", {"name": "World News"}, format="json")

        self.assertEqual(response.status_code, 201)
        data = response.json()["data"]
        self.assertEqual(data["slug"], "world-news")
        self.assertEqual(data["color"], "bg-gray-100 text-gray-700")

    def test_duplicate_name_returns_400(self):
        self.api_client.post("/api/categories", make_category_payload(), format="json")

        response = self.api_client.post(
            "/api/categories", make_category_payload(slug="tech"), format="json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("name", response.json()["errors"][0])
        self.assertEqual(len(self.storage.list_categories()), 1)

    def test_storage_duplicate_error_maps_to_400(self):
        """A clash found only by the storage still answers with a field error."""
        self.storage.create_category(make_category_payload())

        with mock.patch("articles.serializers.CategorySerializer.validate", side_effect=lambda attrs: attrs):
            response = self.api_client.post("/api/categories", make_category_payload(), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIsNone(response.json()["data"])

    def test_get_update_delete_by_slug(self):
        self.storage.create_category(make_category_payload())

        fetched = self.api_client.get("/api/categories/technology")
        updated = self.api_client.put(
            "/api/categories/technology", {"description": "Gadgets and code"}, format="json"
        )
        deleted = self.api_client.delete("/api/categories/technology")

        self.assertEqual(fetched.json()["data"]["name"], "Technology")
        self.assertEqual(updated.json()["data"]["description"], "Gadgets and code")
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(self.api_client.get("/api/categories/technology").status_code, 404)

    def test_list_is_ordered_by_name(self):
        self.storage.create_category(make_category_payload(name="Sports", slug="sports"))
        self.storage.create_category(make_category_payload(name="Business", slug="business"))

        names = [c["name"] for c in self.api_client.get("/api/categories").json()["data"]]

        self.assertEqual(names, ["Business", "Sports"])


class DatabaseBackedApiTests(StorageTestMixin, TestCase):
    """Smoke the same endpoints through the ORM backend."""

    storage_class = DatabaseStorage

    def setUp(self):
        super().setUp()
        self.api_client: APIClient = APIClient()

    def test_article_lifecycle(self):
        created = self.api_client.post("/api/articles", make_article_payload(), format="json")
        article_id = created.json()["data"]["id"]

        viewed = self.api_client.get(f"/api/articles/{article_id}")
        liked = self.api_client.post(f"/api/articles/{article_id}/like")
        deleted = self.api_client.delete(f"/api/articles/{article_id}")

        self.assertEqual(created.status_code, 201)
        self.assertEqual(viewed.json()["data"]["views"], 1)
        self.assertEqual(liked.json()["data"], {"likes": 1})
        self.assertEqual(deleted.status_code, 204)

    def test_database_failure_returns_generic_500(self):
        with mock.patch.object(DatabaseStorage, "list_articles", side_effect=DatabaseError("down")):
            response = self.api_client.get("/api/articles")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"data": None, "errors": ["Internal server error."]})

    def test_unexpected_error_returns_enveloped_500(self):
        with mock.patch.object(DatabaseStorage, "list_categories", side_effect=RuntimeError("boom")):
            response = self.api_client.get("/api/categories")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["errors"], ["Internal server error."])
