"""
Accounts app models

Custom User model keyed by UUID, logging in with email instead of username.
"""
import hashlib
import uuid

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


def gravatar_url(email: str, size: int = 200) -> str:
    """
    Build the Gravatar URL for an email address (mystery-man fallback, PG rated).
    """
    digest = hashlib.md5(email.strip().lower().encode('utf-8')).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?s={size}&r=pg&d=mm"


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The email must be set')
        email = self.normalize_email(email)
        extra_fields.setdefault('avatar', gravatar_url(email))
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Developer account.

    Owns at most one profile and any number of posts. ``name`` and ``avatar``
    are copied onto posts and comments when those are written.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = None
    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    avatar = models.URLField(max_length=500, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    def __str__(self):
        return f"{self.name} <{self.email}>"

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
