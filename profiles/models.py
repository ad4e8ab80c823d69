"""
Profiles app models

Developer profile, one per user. Experience, education and social links are
stored on the profile row as JSON so every mutation writes a single row.

Entry shapes:
{
  "experience": [
    {"id": "…", "title": "…", "company": "…", "location": "…",
     "from": "2019-01-01", "to": null, "current": true, "description": "…"}
  ],
  "education": [
    {"id": "…", "school": "…", "degree": "…", "fieldofstudy": "…",
     "from": "2012-09-01", "to": "2016-06-01", "current": false, "description": "…"}
  ],
  "social": {"youtube": "…", "twitter": "…", "facebook": "…",
             "linkedin": "…", "instagram": "…"}
}
"""
import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class Profile(models.Model):
    """
    Developer profile.

    ``experience`` and ``education`` are kept most-recent-first.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile',
    )
    company = models.CharField(max_length=255, blank=True)
    website = models.CharField(max_length=500, blank=True)
    location = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=255)
    skills = models.JSONField(default=list, blank=True)
    bio = models.TextField(blank=True)
    githubusername = models.CharField(max_length=255, blank=True)
    experience = models.JSONField(default=list, blank=True)
    education = models.JSONField(default=list, blank=True)
    social = models.JSONField(default=dict, blank=True)
    date = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"Profile for {self.user.email}"

    class Meta:
        verbose_name = 'Profile'
        verbose_name_plural = 'Profiles'
        ordering = ['date']
