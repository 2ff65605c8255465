"""HTML forms for the article editor, comments, and newsletter signup."""

from django import forms


class ArticleForm(forms.Form):
    title = forms.CharField(max_length=255)
    excerpt = forms.CharField(widget=forms.Textarea(attrs={"rows": 2}))
    content = forms.CharField(widget=forms.Textarea(attrs={"rows": 12}))
    author = forms.CharField(max_length=255)
    author_title = forms.CharField(max_length=255)
    author_image = forms.URLField(max_length=500, required=False)
    category = forms.CharField(
        max_length=100, widget=forms.TextInput(attrs={"list": "category-options"})
    )
    tags = forms.CharField(
        required=False,
        help_text="Comma-separated",
        widget=forms.TextInput(attrs={"placeholder": "AI, Smart Cities"}),
    )
    image_url = forms.URLField(max_length=500, required=False)
    published = forms.BooleanField(required=False)
    featured = forms.BooleanField(required=False)

    @classmethod
    def for_article(cls, article) -> "ArticleForm":
        """Unbound form pre-filled from an existing article."""
        initial = {name: getattr(article, name, None) for name in cls.base_fields}
        initial["tags"] = ", ".join(article.tags or [])
        return cls(initial=initial)

    def clean_tags(self) -> list[str]:
        tags: list[str] = []
        for tag in self.cleaned_data.get("tags", "").split(","):
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags

    def to_payload(self) -> dict:
        """Cleaned data in the shape the storage expects."""
        payload = dict(self.cleaned_data)
        for key in ("author_image", "image_url"):
            payload[key] = payload.get(key) or None
        return payload


class CommentForm(forms.Form):
    author = forms.CharField(max_length=255)
    email = forms.EmailField()
    content = forms.CharField(widget=forms.Textarea(attrs={"rows": 4}))


class NewsletterForm(forms.Form):
    email = forms.EmailField()
