"""Routing for the reader-facing pages and the admin panel."""

from django.urls import path

from . import views

app_name = "pages"

urlpatterns = [
    path("", views.home, name="home"),
    path("search", views.search, name="search"),
    path("newsletter", views.newsletter_signup, name="newsletter"),
    path("category/<slug:slug>", views.category_page, name="category"),
    path("article/<str:article_id>", views.article_detail, name="article"),
    path("article/<str:article_id>/like", views.article_like, name="article-like"),
    path("article/<str:article_id>/comments", views.comment_create, name="comment-create"),
    path(
        "article/<str:article_id>/comments/<str:comment_id>/delete",
        views.comment_delete,
        name="comment-delete",
    ),
    path("admin/", views.admin_panel, name="admin-panel"),
    path("admin/articles/<str:article_id>", views.admin_article_edit, name="admin-article-edit"),
    path("admin/articles/<str:article_id>/delete", views.admin_article_delete, name="admin-article-delete"),
]
