"""Server-rendered pages: front page, article, category, search, admin panel."""

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_POST

from articles.storage import ArticleFilter
from .forms import ArticleForm, CommentForm, NewsletterForm
from .queries import ARTICLES, get_queries
from .selectors import (
    category_lead,
    category_sections,
    reading_time,
    related_articles,
    split_featured,
    split_published,
    trending,
)


PUBLISHED = ArticleFilter(published=True)


def _sidebar(queries) -> dict:
    published = queries.articles(PUBLISHED)
    return {
        "trending": trending(published),
        "recent": published[:4],
        "newsletter_form": NewsletterForm(),
    }


@require_GET
def home(request):
    queries = get_queries(request)
    articles = queries.articles(PUBLISHED)
    front = split_featured(articles)
    context = {
        "front": front,
        "latest": front.regular[1:5],
        "sections": category_sections(queries.categories(), articles),
        **_sidebar(queries),
    }
    return render(request, "pages/home.html", context)


@require_GET
def article_detail(request, article_id: str):
    """Render an article, counting one view."""
    queries = get_queries(request)
    article = queries.record_view(article_id)
    if article is None:
        raise Http404("Article not found")
    context = {
        "article": article,
        "reading_time": reading_time(article.content),
        "comments": queries.comments(article_id),
        "comment_form": CommentForm(),
        "related": related_articles(article, queries.articles(PUBLISHED)),
        "share_url": request.build_absolute_uri(),
        **_sidebar(queries),
    }
    return render(request, "pages/article.html", context)


@require_POST
def article_like(request, article_id: str):
    queries = get_queries(request)
    article = queries.storage.increment_likes(article_id)
    if article is None:
        raise Http404("Article not found")
    queries.invalidate(ARTICLES, str(article_id))
    return redirect("pages:article", article_id=article_id)


@require_POST
def comment_create(request, article_id: str):
    queries = get_queries(request)
    form = CommentForm(request.POST)
    target = reverse("pages:article", args=[article_id]) + "#comments"
    if not form.is_valid():
        messages.error(request, "Please fill in all fields with a valid email address.")
        return redirect(target)
    comment = queries.storage.create_comment(article_id, form.cleaned_data)
    if comment is None:
        raise Http404("Article not found")
    queries.invalidate(ARTICLES, str(article_id), "comments")
    messages.success(request, "Comment posted! Your comment has been added to the discussion.")
    return redirect(target)


@require_POST
def comment_delete(request, article_id: str, comment_id: str):
    queries = get_queries(request)
    if queries.storage.delete_comment(comment_id):
        queries.invalidate(ARTICLES, str(article_id), "comments")
        messages.success(request, "Comment deleted.")
    else:
        messages.error(request, "Comment not found.")
    return redirect(reverse("pages:article", args=[article_id]) + "#comments")


@require_GET
def category_page(request, slug: str):
    queries = get_queries(request)
    category = queries.category(slug)
    if category is None:
        raise Http404("Category not found")
    articles = queries.articles(ArticleFilter(category=category.name, published=True))
    lead, rest = category_lead(articles)
    context = {
        "category": category,
        "lead": lead,
        "articles": rest,
        "total": len(articles),
        **_sidebar(queries),
    }
    return render(request, "pages/category.html", context)


@require_GET
def search(request):
    """Search published articles; nothing runs until a term or category is given."""
    queries = get_queries(request)
    term = request.GET.get("q", "").strip()
    selected = request.GET.get("category", "").strip()
    results = None
    if term or selected:
        results = queries.articles(ArticleFilter(query=term or None, category=selected or None, published=True))
    context = {
        "term": term,
        "selected_category": selected,
        "categories": queries.categories(),
        "results": results,
    }
    return render(request, "pages/search.html", context)


@require_POST
def newsletter_signup(request):
    form = NewsletterForm(request.POST)
    if form.is_valid():
        messages.success(request, "Subscribed! Thank you for subscribing to our newsletter.")
    else:
        messages.error(request, "Please enter a valid email address.")
    target = request.POST.get("next", "")
    if not url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        target = reverse("pages:home")
    return redirect(target)


def admin_panel(request):
    """List published articles and drafts; POST creates a new article."""
    queries = get_queries(request)
    form = ArticleForm()
    if request.method == "POST":
        form = ArticleForm(request.POST)
        if form.is_valid():
            article = queries.storage.create_article(form.to_payload())
            queries.invalidate(ARTICLES)
            messages.success(request, f"Article created: {article.title}")
            return redirect("pages:admin-panel")
        messages.error(request, "Failed to create article. Please check the form.")
    published, drafts = split_published(queries.articles())
    context = {
        "form": form,
        "published": published,
        "drafts": drafts,
        "total": len(published) + len(drafts),
        "categories": queries.categories(),
    }
    return render(request, "pages/admin_panel.html", context, status=400 if form.errors else 200)


def admin_article_edit(request, article_id: str):
    queries = get_queries(request)
    article = queries.article(article_id)
    if article is None:
        raise Http404("Article not found")
    if request.method == "POST":
        form = ArticleForm(request.POST)
        if form.is_valid():
            queries.storage.update_article(article_id, form.to_payload())
            queries.invalidate(ARTICLES)
            messages.success(request, "Article updated.")
            return redirect("pages:admin-panel")
        messages.error(request, "Failed to update article. Please check the form.")
    else:
        form = ArticleForm.for_article(article)
    context = {"form": form, "article": article, "categories": queries.categories()}
    return render(request, "pages/article_form.html", context, status=400 if form.errors else 200)


@require_POST
def admin_article_delete(request, article_id: str):
    queries = get_queries(request)
    if queries.storage.delete_article(article_id):
        queries.invalidate(ARTICLES)
        messages.success(request, "Article deleted.")
    else:
        messages.error(request, "Article not found.")
    return redirect("pages:admin-panel")


@require_GET
def robots_txt(request):
    context = {"sitemap_url": request.build_absolute_uri(reverse("sitemap"))}
    return render(request, "pages/robots.txt", context, content_type="text/plain")


__all__ = [
    "admin_article_delete",
    "admin_article_edit",
    "admin_panel",
    "article_detail",
    "article_like",
    "category_page",
    "comment_create",
    "comment_delete",
    "home",
    "newsletter_signup",
    "robots_txt",
    "search",
]
