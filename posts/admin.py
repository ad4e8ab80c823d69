from django.contrib import admin
from .models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """Admin interface for Post."""

    list_display = ['name', 'user', 'date']
    list_filter = ['date']
    search_fields = ['text', 'name', 'user__email']
    readonly_fields = ['date']
