from django.contrib import admin
from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """Admin interface for Profile."""

    list_display = ['user', 'status', 'company', 'location', 'date']
    list_filter = ['date']
    search_fields = ['user__name', 'user__email', 'company', 'location', 'githubusername']
    readonly_fields = ['date']
