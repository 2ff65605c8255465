"""App configuration for the articles Django application.

This module wires up the application config and ensures that storage-related
system checks are registered when Django starts.
"""

from django.apps import AppConfig


class ArticlesConfig(AppConfig):
    """Articles app holds the news models, storage backends, and REST API."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "articles"

    def ready(self) -> None:
        """Register system checks when the app is loaded."""
        # Import system checks so they are registered with Django.
        from . import checks  # noqa: F401
