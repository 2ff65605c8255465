"""Storage factory for the configured news backend."""

import logging
import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base import ArticleFilter, DuplicateError, NewsStorage, StorageError
from .database import DatabaseStorage
from .memory import MemoryStorage

logger = logging.getLogger(__name__)

BACKENDS = ("database", "memory")

_instances: dict[str, NewsStorage] = {}
_instances_lock = threading.Lock()


def get_storage() -> NewsStorage:
    """Return the singleton storage for ``settings.NEWS_STORAGE_BACKEND``."""

    backend = getattr(settings, "NEWS_STORAGE_BACKEND", "memory")
    with _instances_lock:
        storage = _instances.get(backend)
        if storage is None:
            storage = _build(backend)
            _instances[backend] = storage
            logger.info("Using %s storage backend", backend)
    return storage


def reset_storage() -> None:
    """Forget cached backends so the next call rebuilds them."""
    with _instances_lock:
        _instances.clear()


def _build(backend: str) -> NewsStorage:
    if backend == "database":
        return DatabaseStorage()
    if backend == "memory":
        return MemoryStorage(seed=getattr(settings, "NEWS_SEED_DEMO_DATA", True))
    raise ImproperlyConfigured(
        f"NEWS_STORAGE_BACKEND must be one of {', '.join(BACKENDS)}; got {backend!r}"
    )


__all__ = [
    "ArticleFilter",
    "BACKENDS",
    "DatabaseStorage",
    "DuplicateError",
    "MemoryStorage",
    "NewsStorage",
    "StorageError",
    "get_storage",
    "reset_storage",
]
