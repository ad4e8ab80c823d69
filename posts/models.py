"""
Posts app models

Post model with likes and comments stored on the post row.
"""
import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class Post(models.Model):
    """
    Short text post.

    ``name`` and ``avatar`` are copied from the author when the post is
    written and are not refreshed afterwards.

    likes:    [{"user": "<user uuid>"}], newest first, one entry per user
    comments: [{"id", "user", "text", "name", "avatar", "date"}], newest first
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posts',
    )
    text = models.TextField()
    name = models.CharField(max_length=255, blank=True)
    avatar = models.URLField(max_length=500, blank=True)
    likes = models.JSONField(default=list, blank=True)
    comments = models.JSONField(default=list, blank=True)
    date = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"Post by {self.name or self.user_id}"

    def liked_by(self, user_id) -> bool:
        return any(like.get('user') == str(user_id) for like in self.likes or [])

    class Meta:
        verbose_name = 'Post'
        verbose_name_plural = 'Posts'
        ordering = ['-date']
        indexes = [
            models.Index(fields=['user', 'date'], name='posts_user_date_idx'),
        ]
