"""Serializers validating API payloads and shaping storage records.

Serializers are plain (non-model) so they work for both storage backends:
Django model instances and in-memory records expose the same attributes.
"""

from django.utils.text import slugify
from rest_framework import serializers

from .storage import get_storage

DEFAULT_CATEGORY_COLOR = "bg-gray-100 text-gray-700"


class ArticleSerializer(serializers.Serializer):
    """Article payload; counters and timestamps are read-only."""

    id = serializers.CharField(read_only=True)
    title = serializers.CharField(max_length=255)
    content = serializers.CharField()
    excerpt = serializers.CharField()
    author = serializers.CharField(max_length=255)
    author_title = serializers.CharField(max_length=255)
    author_image = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    category = serializers.CharField(max_length=100)
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50, allow_blank=True), required=False, default=list
    )
    image_url = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    published = serializers.BooleanField(required=False, default=False)
    featured = serializers.BooleanField(required=False, default=False)
    views = serializers.IntegerField(read_only=True)
    likes = serializers.IntegerField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)

    @staticmethod
    def validate_tags(value):
        """Trim tags and drop blanks and duplicates while keeping order."""
        cleaned: list[str] = []
        for tag in value:
            tag = tag.strip()
            if tag and tag not in cleaned:
                cleaned.append(tag)
        return cleaned

    def validate(self, attrs):
        """Store empty optional URLs as null."""
        for key in ("author_image", "image_url"):
            if key in attrs and not attrs[key]:
                attrs[key] = None
        return attrs


class CommentSerializer(serializers.Serializer):
    """Reader comment; the article id comes from the URL, never the body."""

    id = serializers.CharField(read_only=True)
    article_id = serializers.CharField(read_only=True)
    author = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    content = serializers.CharField()
    created_at = serializers.DateTimeField(read_only=True)


class CategorySerializer(serializers.Serializer):
    """Category with unique name and slug; the slug defaults to slugify(name)."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=100)
    slug = serializers.SlugField(max_length=100, required=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    color = serializers.CharField(max_length=100, required=False, default=DEFAULT_CATEGORY_COLOR)

    def validate(self, attrs):
        """Derive the slug and reject names or slugs already in use."""
        name = attrs.get("name")
        if name is not None and not attrs.get("slug") and self.instance is None:
            attrs["slug"] = slugify(name)
        if "slug" in attrs and not attrs["slug"]:
            raise serializers.ValidationError({"slug": ["Slug could not be derived from the name."]})

        storage = self.context.get("storage") or get_storage()
        current_id = str(self.instance.id) if self.instance is not None else None
        errors = {}
        for category in storage.list_categories():
            if str(category.id) == current_id:
                continue
            if "name" in attrs and category.name == attrs["name"]:
                errors["name"] = ["Category with this name already exists."]
            if "slug" in attrs and category.slug == attrs["slug"]:
                errors["slug"] = ["Category with this slug already exists."]
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


__all__ = ["ArticleSerializer", "CategorySerializer", "CommentSerializer", "DEFAULT_CATEGORY_COLOR"]
