"""System checks for the news storage configuration."""

from django.conf import settings
from django.core.checks import Error, register


@register()
def storage_backend_is_known(app_configs, **kwargs):
    """Ensure NEWS_STORAGE_BACKEND names one of the available backends."""
    errors: list[Error] = []

    # Import here to avoid circular imports at module load time.
    from .storage import BACKENDS

    backend = getattr(settings, "NEWS_STORAGE_BACKEND", None)
    if backend not in BACKENDS:
        errors.append(
            Error(
                f"NEWS_STORAGE_BACKEND is {backend!r}; expected one of {', '.join(BACKENDS)}.",
                hint="Set NEWS_STORAGE_BACKEND to 'database' or 'memory'.",
                id="articles.E001",
            )
        )

    return errors
