"""Django admin configuration for articles, comments, and categories."""

from django.contrib import admin

from .models import Article, Category, Comment


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    fields = ["author", "email", "content", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    """Editorial view of articles; counters are only changed by readers."""

    list_display = ["title_short", "category", "author", "published", "featured", "views", "likes", "created_at"]
    list_filter = ["published", "featured", "category"]
    search_fields = ["title", "content", "author"]
    list_editable = ["published", "featured"]
    readonly_fields = ["views", "likes", "created_at", "updated_at"]
    date_hierarchy = "created_at"
    inlines = [CommentInline]
    actions = ["publish_articles", "unpublish_articles"]

    fieldsets = (
        (None, {
            "fields": ("title", "excerpt", "content", "category", "tags", "image_url"),
        }),
        ("Author", {
            "fields": ("author", "author_title", "author_image"),
        }),
        ("Status", {
            "fields": ("published", "featured", "views", "likes", "created_at", "updated_at"),
        }),
    )

    @admin.display(description="Title")
    def title_short(self, obj):
        return obj.title[:80] + "…" if len(obj.title) > 80 else obj.title

    @admin.action(description="Publish selected articles")
    def publish_articles(self, request, queryset):
        updated = queryset.update(published=True)
        self.message_user(request, f"Published {updated} article(s).")

    @admin.action(description="Unpublish selected articles")
    def unpublish_articles(self, request, queryset):
        updated = queryset.update(published=False)
        self.message_user(request, f"Unpublished {updated} article(s).")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["author", "email", "article", "created_at"]
    search_fields = ["author", "email", "content"]
    readonly_fields = ["created_at"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "color"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ("name",)}
