"""REST endpoints for articles, comments, and categories.

Every view delegates to the configured :class:`~articles.storage.NewsStorage`;
none of them touch the ORM directly.
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound

from core.response import BaseAPIView, api_response, no_content
from .serializers import ArticleSerializer, CategorySerializer, CommentSerializer
from .storage import ArticleFilter, get_storage

ARTICLE_FILTER_PARAMETERS = [
    OpenApiParameter("query", str, description="Substring of title, content, or author"),
    OpenApiParameter("category", str, description="Category name, case-insensitive"),
    OpenApiParameter("tags", str, many=True, description="Match any of these tags"),
    OpenApiParameter("published", bool),
    OpenApiParameter("featured", bool),
]


class StorageMixin:
    """Resolve the storage and look up entities, raising 404 when absent."""

    @property
    def storage(self):
        return get_storage()

    def get_article_or_404(self, article_id: str):
        article = self.storage.get_article(article_id)
        if article is None:
            raise NotFound("Article not found")
        return article

    def get_category_or_404(self, slug: str):
        category = self.storage.get_category_by_slug(slug)
        if category is None:
            raise NotFound("Category not found")
        return category


class ArticleListView(StorageMixin, BaseAPIView):
    @extend_schema(parameters=ARTICLE_FILTER_PARAMETERS, responses=ArticleSerializer(many=True))
    def get(self, request):
        """List articles, newest first, narrowed by the query-string filters."""
        params = ArticleFilter.from_query_params(request.query_params)
        articles = self.storage.list_articles(params)
        return api_response(ArticleSerializer(articles, many=True).data)

    @extend_schema(request=ArticleSerializer, responses={201: ArticleSerializer})
    def post(self, request):
        """Create an article with zeroed view and like counters."""
        serializer = ArticleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        article = self.storage.create_article(serializer.validated_data)
        return api_response(ArticleSerializer(article).data, status=status.HTTP_201_CREATED)


class ArticleDetailView(StorageMixin, BaseAPIView):
    @extend_schema(responses=ArticleSerializer)
    def get(self, request, article_id: str):
        """Return an article and count one view for it."""
        article = self.storage.increment_views(article_id)
        if article is None:
            raise NotFound("Article not found")
        return api_response(ArticleSerializer(article).data)

    @extend_schema(request=ArticleSerializer, responses=ArticleSerializer)
    def put(self, request, article_id: str):
        """Partially update an article; omitted fields keep their values."""
        serializer = ArticleSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        article = self.storage.update_article(article_id, serializer.validated_data)
        if article is None:
            raise NotFound("Article not found")
        return api_response(ArticleSerializer(article).data)

    def delete(self, request, article_id: str):
        """Delete an article and its comments."""
        if not self.storage.delete_article(article_id):
            raise NotFound("Article not found")
        return no_content()


class ArticleLikeView(StorageMixin, BaseAPIView):
    def post(self, request, article_id: str):
        article = self.storage.increment_likes(article_id)
        if article is None:
            raise NotFound("Article not found")
        return api_response({"likes": article.likes})


class ArticleViewsView(StorageMixin, BaseAPIView):
    def post(self, request, article_id: str):
        article = self.storage.increment_views(article_id)
        if article is None:
            raise NotFound("Article not found")
        return api_response({"views": article.views})


class ArticleCommentsView(StorageMixin, BaseAPIView):
    @extend_schema(responses=CommentSerializer(many=True))
    def get(self, request, article_id: str):
        """List comments on an article, newest first."""
        self.get_article_or_404(article_id)
        comments = self.storage.list_comments(article_id)
        return api_response(CommentSerializer(comments, many=True).data)

    @extend_schema(request=CommentSerializer, responses={201: CommentSerializer})
    def post(self, request, article_id: str):
        """Attach a new comment to the article in the URL."""
        serializer = CommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = self.storage.create_comment(article_id, serializer.validated_data)
        if comment is None:
            raise NotFound("Article not found")
        return api_response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)


class CommentDetailView(StorageMixin, BaseAPIView):
    def delete(self, request, comment_id: str):
        if not self.storage.delete_comment(comment_id):
            raise NotFound("Comment not found")
        return no_content()


class CategoryListView(StorageMixin, BaseAPIView):
    @extend_schema(responses=CategorySerializer(many=True))
    def get(self, request):
        return api_response(CategorySerializer(self.storage.list_categories(), many=True).data)

    @extend_schema(request=CategorySerializer, responses={201: CategorySerializer})
    def post(self, request):
        """Create a category; the slug is derived from the name when omitted."""
        serializer = CategorySerializer(data=request.data, context={"storage": self.storage})
        serializer.is_valid(raise_exception=True)
        category = self.storage.create_category(serializer.validated_data)
        return api_response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)


class CategoryDetailView(StorageMixin, BaseAPIView):
    @extend_schema(responses=CategorySerializer)
    def get(self, request, slug: str):
        return api_response(CategorySerializer(self.get_category_or_404(slug)).data)

    @extend_schema(request=CategorySerializer, responses=CategorySerializer)
    def put(self, request, slug: str):
        """Partially update a category. Articles keep their old label."""
        category = self.get_category_or_404(slug)
        serializer = CategorySerializer(
            category, data=request.data, partial=True, context={"storage": self.storage}
        )
        serializer.is_valid(raise_exception=True)
        updated = self.storage.update_category(category.id, serializer.validated_data)
        if updated is None:
            raise NotFound("Category not found")
        return api_response(CategorySerializer(updated).data)

    def delete(self, request, slug: str):
        category = self.get_category_or_404(slug)
        if not self.storage.delete_category(category.id):
            raise NotFound("Category not found")
        return no_content()


class SearchView(ArticleListView):
    """Read-only alias of the article list used by the search page."""

    http_method_names = ["get", "head", "options"]


__all__ = [
    "ArticleCommentsView",
    "ArticleDetailView",
    "ArticleLikeView",
    "ArticleListView",
    "ArticleViewsView",
    "CategoryDetailView",
    "CategoryListView",
    "CommentDetailView",
    "SearchView",
]
