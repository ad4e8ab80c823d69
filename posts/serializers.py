"""
Posts app serializers

Serializers for Post model and the text payloads of posts and comments.
"""
from rest_framework import serializers
from .models import Post


class PostSerializer(serializers.ModelSerializer):
    """
    Serializer for Post.

    Everything is read-only; writes go through PostService.
    """

    class Meta:
        model = Post
        fields = [
            'id',
            'user',
            'text',
            'name',
            'avatar',
            'likes',
            'comments',
            'date',
        ]
        read_only_fields = fields


class TextSerializer(serializers.Serializer):
    """Validate the ``text`` of a new post or comment."""

    text = serializers.CharField(
        error_messages={
            'required': 'Text is required',
            'blank': 'Text is required',
            'null': 'Text is required',
        },
    )
