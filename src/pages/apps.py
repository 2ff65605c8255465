"""App configuration for the reader-facing pages."""

from django.apps import AppConfig


class PagesConfig(AppConfig):
    """Pages app renders the site, the admin panel, and the sitemap."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "pages"
