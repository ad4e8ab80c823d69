"""
Post Service Layer
Handles post creation, owner-checked deletes, likes and comments.
"""
import logging
import uuid
from typing import Dict, List

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from devconnector.exceptions import (
    AlreadyLiked,
    CommentNotFound,
    Forbidden,
    NotLiked,
    PostNotFound,
    store_operation,
)
from .models import Post

logger = logging.getLogger(__name__)


class PostService:
    """Service for posts and the likes/comments stored on them."""

    @staticmethod
    def _lookup(queryset, post_id) -> Post:
        # Malformed ids are reported the same way as missing posts.
        try:
            return queryset.get(pk=post_id)
        except (Post.DoesNotExist, ValidationError, ValueError):
            raise PostNotFound()

    @staticmethod
    @store_operation
    def create(user, text: str) -> Post:
        """
        Create a post, snapshotting the author's name and avatar.
        """
        post = Post.objects.create(
            user=user,
            text=text,
            name=user.name,
            avatar=user.avatar,
        )
        logger.info("User %s created post %s", user.pk, post.pk)
        return post

    @staticmethod
    @store_operation
    def list_posts() -> List[Post]:
        """All posts, newest first."""
        return list(Post.objects.order_by('-date'))

    @staticmethod
    @store_operation
    def get_by_id(post_id) -> Post:
        """
        Raises:
            PostNotFound: No such post, or ``post_id`` is not a valid id
        """
        return PostService._lookup(Post.objects.all(), post_id)

    @staticmethod
    @store_operation
    def delete_by_id(user, post_id) -> None:
        """
        Delete a post owned by ``user``.

        Raises:
            PostNotFound: No such post
            Forbidden: The post belongs to someone else
        """
        with transaction.atomic():
            post = PostService._lookup(Post.objects.select_for_update(), post_id)
            if post.user_id != user.pk:
                logger.warning("User %s tried to delete post %s owned by %s", user.pk, post.pk, post.user_id)
                raise Forbidden()
            post.delete()

        logger.info("User %s deleted post %s", user.pk, post_id)

    @staticmethod
    @store_operation
    def like(user, post_id) -> List[Dict]:
        """
        Add ``user`` to the post's likes.

        Returns:
            The updated likes list

        Raises:
            PostNotFound: No such post
            AlreadyLiked: ``user`` already likes the post
        """
        with transaction.atomic():
            post = PostService._lookup(Post.objects.select_for_update(), post_id)
            if post.liked_by(user.pk):
                raise AlreadyLiked()
            post.likes = [{'user': str(user.pk)}] + list(post.likes or [])
            post.save(update_fields=['likes'])

        return post.likes

    @staticmethod
    @store_operation
    def unlike(user, post_id) -> List[Dict]:
        """
        Remove ``user`` from the post's likes.

        Returns:
            The updated likes list

        Raises:
            PostNotFound: No such post
            NotLiked: ``user`` does not like the post
        """
        with transaction.atomic():
            post = PostService._lookup(Post.objects.select_for_update(), post_id)
            if not post.liked_by(user.pk):
                raise NotLiked()
            post.likes = [like for like in post.likes if like.get('user') != str(user.pk)]
            post.save(update_fields=['likes'])

        return post.likes

    @staticmethod
    @store_operation
    def add_comment(user, post_id, text: str) -> List[Dict]:
        """
        Prepend a comment by ``user``, snapshotting name and avatar.

        Returns:
            The updated comments list
        """
        with transaction.atomic():
            post = PostService._lookup(Post.objects.select_for_update(), post_id)
            comment = {
                'id': uuid.uuid4().hex,
                'user': str(user.pk),
                'text': text,
                'name': user.name,
                'avatar': user.avatar,
                'date': timezone.now().isoformat(),
            }
            post.comments = [comment] + list(post.comments or [])
            post.save(update_fields=['comments'])

        logger.info("User %s commented on post %s", user.pk, post.pk)
        return post.comments

    @staticmethod
    @store_operation
    def remove_comment(user, post_id, comment_id: str) -> List[Dict]:
        """
        Remove a comment written by ``user``.

        Raises:
            PostNotFound: No such post
            CommentNotFound: No comment with ``comment_id`` on the post
            Forbidden: The comment was written by someone else
        """
        with transaction.atomic():
            post = PostService._lookup(Post.objects.select_for_update(), post_id)
            comments = list(post.comments or [])
            comment = next((item for item in comments if item.get('id') == comment_id), None)
            if comment is None:
                raise CommentNotFound()
            if comment.get('user') != str(user.pk):
                raise Forbidden()
            post.comments = [item for item in comments if item.get('id') != comment_id]
            post.save(update_fields=['comments'])

        return post.comments
