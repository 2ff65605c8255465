"""Seed demo categories and articles into the database."""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from articles.demo_data import DEMO_ARTICLES, DEMO_CATEGORIES
from articles.models import Article, Category


def create_seed_categories() -> dict:
    """Create demo categories missing by slug and return a slug->Category map."""
    categories = {}
    for data in DEMO_CATEGORIES:
        category, _ = Category.objects.get_or_create(slug=data["slug"], defaults=data)
        categories[category.slug] = category
    return categories


def create_seed_articles() -> list:
    """Create demo articles missing by title, newest first.

    Timestamps are staggered an hour apart so the listing order matches the
    order of ``DEMO_ARTICLES``.
    """
    now = timezone.now()
    articles = []
    for offset, data in enumerate(DEMO_ARTICLES):
        article, created = Article.objects.get_or_create(title=data["title"], defaults=data)
        if created:
            # created_at is auto_now_add, so it can only be moved with update().
            stamp = now - timedelta(hours=offset)
            Article.objects.filter(pk=article.pk).update(created_at=stamp, updated_at=stamp)
            article.refresh_from_db()
        articles.append(article)
    return articles


class Command(BaseCommand):
    """Management command to seed the demo news content."""

    help = (
        "Seed demo categories and articles. "
        "Use --reset to clear previously seeded data first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo categories and articles (and their comments) before seeding.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            self._reset_seeded_data()

        self.stdout.write("Seeding news data...")
        categories = create_seed_categories()
        articles = create_seed_articles()
        self.stdout.write(
            self.style.SUCCESS(
                f"News seed completed: {len(categories)} categories, {len(articles)} articles."
            )
        )

    def _reset_seeded_data(self) -> None:
        """Remove only the rows this command creates; user content is left alone."""
        self.stdout.write("Resetting previously seeded news data...")

        titles = [data["title"] for data in DEMO_ARTICLES]
        # Comments go with their articles via the FK cascade.
        Article.objects.filter(title__in=titles).delete()
        Category.objects.filter(slug__in=[data["slug"] for data in DEMO_CATEGORIES]).delete()

        self.stdout.write(self.style.WARNING("Seeded news data cleared."))
