"""
Profile Service Layer
Handles profile upserts, experience/education entries, account deletion
and the GitHub repository lookup.
"""
import logging
import uuid
from typing import Dict, Iterable, List, Set
from urllib.parse import quote

import requests
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from accounts.models import User
from devconnector.exceptions import (
    GithubProfileNotFound,
    ProfileNotFound,
    UpstreamError,
    store_operation,
)
from posts.models import Post
from .models import Profile

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for reading and mutating developer profiles."""

    SCALAR_FIELDS = ['company', 'website', 'location', 'bio', 'status', 'githubusername']
    SOCIAL_FIELDS = ['youtube', 'twitter', 'facebook', 'linkedin', 'instagram']

    EXPERIENCE = 'experience'
    EDUCATION = 'education'

    @staticmethod
    def parse_skills(raw) -> List[str]:
        """
        Turn ``"html, css,js"`` (or a list) into ``["html", "css", "js"]``.

        Order is preserved; blank items are dropped.
        """
        if isinstance(raw, (list, tuple)):
            items: Iterable = raw
        else:
            items = str(raw).split(',')
        return [str(item).strip() for item in items if str(item).strip()]

    @staticmethod
    @store_operation
    def get_by_owner(user_id) -> Profile:
        """
        Get the profile owned by ``user_id``.

        Raises:
            ProfileNotFound: No profile, or ``user_id`` is not a valid id
        """
        try:
            return Profile.objects.select_related('user').get(user_id=user_id)
        except (Profile.DoesNotExist, ValidationError, ValueError):
            raise ProfileNotFound()

    @staticmethod
    @store_operation
    def get_all() -> List[Profile]:
        """All profiles, oldest first."""
        return list(Profile.objects.select_related('user').order_by('date', 'id'))

    @staticmethod
    @store_operation
    def upsert(user, fields: Dict) -> Profile:
        """
        Create the user's profile, or merge ``fields`` into the existing one.

        Only supplied, non-empty fields overwrite stored values. Social links
        merge key by key. The owner row is locked for the duration, and the
        unique owner column keeps concurrent creates to a single profile.
        """
        with transaction.atomic():
            profile, created = Profile.objects.select_for_update().get_or_create(user=user)
            ProfileService._apply_fields(profile, fields)
            profile.save()

        logger.info("%s profile for user %s", "Created" if created else "Updated", user.pk)
        return profile

    @staticmethod
    def _apply_fields(profile: Profile, fields: Dict) -> None:
        for name in ProfileService.SCALAR_FIELDS:
            value = fields.get(name)
            if value:
                setattr(profile, name, value)

        if fields.get('skills'):
            profile.skills = ProfileService.parse_skills(fields['skills'])

        social = dict(profile.social or {})
        for name in ProfileService.SOCIAL_FIELDS:
            value = fields.get(name)
            if value:
                social[name] = value
        profile.social = social

    @staticmethod
    def add_experience(user, entry: Dict) -> Profile:
        return ProfileService._add_entry(user, ProfileService.EXPERIENCE, entry)

    @staticmethod
    def remove_experience(user, entry_id: str) -> Profile:
        return ProfileService._remove_entry(user, ProfileService.EXPERIENCE, entry_id)

    @staticmethod
    def add_education(user, entry: Dict) -> Profile:
        return ProfileService._add_entry(user, ProfileService.EDUCATION, entry)

    @staticmethod
    def remove_education(user, entry_id: str) -> Profile:
        return ProfileService._remove_entry(user, ProfileService.EDUCATION, entry_id)

    @staticmethod
    def _build_entry(entry: Dict, taken: Set[str]) -> Dict:
        entry_id = uuid.uuid4().hex
        while entry_id in taken:
            entry_id = uuid.uuid4().hex

        clean = {'id': entry_id}
        for key, value in entry.items():
            # Dates are stored as ISO strings inside the JSON column.
            clean[key] = value.isoformat() if hasattr(value, 'isoformat') else value
        return clean

    @staticmethod
    def _locked_profile(user) -> Profile:
        try:
            return Profile.objects.select_for_update().get(user=user)
        except Profile.DoesNotExist:
            raise ProfileNotFound()

    @staticmethod
    @store_operation
    def _add_entry(user, section: str, entry: Dict) -> Profile:
        """
        Prepend ``entry`` to ``section`` under a fresh id.

        Raises:
            ProfileNotFound: The user has no profile yet
        """
        with transaction.atomic():
            profile = ProfileService._locked_profile(user)
            entries = list(getattr(profile, section) or [])
            new_entry = ProfileService._build_entry(entry, {item.get('id') for item in entries})
            entries.insert(0, new_entry)
            setattr(profile, section, entries)
            profile.save(update_fields=[section])

        logger.info("Added %s entry %s for user %s", section, new_entry['id'], user.pk)
        return profile

    @staticmethod
    @store_operation
    def _remove_entry(user, section: str, entry_id: str) -> Profile:
        """
        Remove the ``section`` entry with ``entry_id``.

        An unknown ``entry_id`` leaves the profile untouched and is not an error.
        """
        with transaction.atomic():
            profile = ProfileService._locked_profile(user)
            entries = list(getattr(profile, section) or [])
            remaining = [item for item in entries if item.get('id') != entry_id]
            if len(remaining) < len(entries):
                setattr(profile, section, remaining)
                profile.save(update_fields=[section])
            else:
                logger.debug("No %s entry %s for user %s", section, entry_id, user.pk)

        return profile

    @staticmethod
    @store_operation
    def delete_cascade(user) -> None:
        """
        Delete the user's posts, then profile, then the account itself.

        All three deletes share one transaction, so a failure part-way leaves
        everything in place.
        """
        with transaction.atomic():
            posts_deleted, _ = Post.objects.filter(user=user).delete()
            Profile.objects.filter(user=user).delete()
            User.objects.filter(pk=user.pk).delete()

        logger.info("Deleted account %s and %s post row(s)", user.pk, posts_deleted)


class GithubService:
    """Read-only proxy for a user's public GitHub repositories."""

    REPO_LIMIT = 5

    @staticmethod
    def list_repos(username: str):
        """
        Fetch the most recently created repositories of ``username``.

        Returns:
            The decoded GitHub payload, unchanged

        Raises:
            GithubProfileNotFound: GitHub answered with a non-200 status
            UpstreamError: GitHub could not be reached or sent invalid JSON
        """
        url = f"{settings.GITHUB_API_URL.rstrip('/')}/users/{quote(username, safe='')}/repos"
        headers = {
            'User-Agent': settings.GITHUB_USER_AGENT,
            'Accept': 'application/vnd.github+json',
        }
        if settings.GITHUB_TOKEN:
            headers['Authorization'] = f"Bearer {settings.GITHUB_TOKEN}"

        try:
            response = requests.get(
                url,
                params={
                    'per_page': GithubService.REPO_LIMIT,
                    'sort': 'created',
                    'direction': 'desc',
                },
                headers=headers,
                timeout=settings.GITHUB_TIMEOUT,
            )
        except requests.RequestException as exc:
            logger.warning("GitHub request for '%s' failed: %s", username, exc)
            raise UpstreamError() from exc

        if response.status_code != 200:
            logger.info("GitHub returned %s for '%s'", response.status_code, username)
            raise GithubProfileNotFound()

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("GitHub sent an undecodable body for '%s'", username)
            raise UpstreamError() from exc
