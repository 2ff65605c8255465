"""Routing for the news REST API, mounted under ``/api/``."""

from django.urls import path

from .views import (
    ArticleCommentsView,
    ArticleDetailView,
    ArticleLikeView,
    ArticleListView,
    ArticleViewsView,
    CategoryDetailView,
    CategoryListView,
    CommentDetailView,
    SearchView,
)

app_name = "api"

urlpatterns = [
    path("articles", ArticleListView.as_view(), name="article-list"),
    path("articles/<str:article_id>", ArticleDetailView.as_view(), name="article-detail"),
    path("articles/<str:article_id>/like", ArticleLikeView.as_view(), name="article-like"),
    path("articles/<str:article_id>/views", ArticleViewsView.as_view(), name="article-views"),
    path("articles/<str:article_id>/comments", ArticleCommentsView.as_view(), name="article-comments"),
    path("comments/<str:comment_id>", CommentDetailView.as_view(), name="comment-detail"),
    path("categories", CategoryListView.as_view(), name="category-list"),
    path("categories/<slug:slug>", CategoryDetailView.as_view(), name="category-detail"),
    path("search", SearchView.as_view(), name="search"),
]
