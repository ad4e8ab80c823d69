"""
Accounts app authentication

JSON Web Token authentication for the REST API.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from jose import JWTError, jwt
from rest_framework import authentication, exceptions, permissions

from .models import User

logger = logging.getLogger(__name__)

TOKEN_HEADER = 'HTTP_X_AUTH_TOKEN'
INVALID_TOKEN_MESSAGE = 'Token is not valid'


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a token that identifies ``user``.

    The payload is ``{"user": {"id": "<uuid>"}, "exp": <expiry>}``.
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(seconds=settings.JWT_EXPIRATION_SECONDS)
    )
    payload = {'user': {'id': str(user.pk)}, 'exp': expire}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


class JSONWebTokenAuthentication(authentication.BaseAuthentication):
    """
    Authenticate requests carrying a signed token.

    The token is read from the ``x-auth-token`` header, falling back to
    ``Authorization: Bearer <token>``. Requests without a token are left
    anonymous so public views keep working; private views reject them through
    their permission classes.
    """

    keyword = 'Bearer'

    def get_token(self, request) -> Optional[str]:
        token = request.META.get(TOKEN_HEADER)
        if token:
            return token.strip()

        auth = authentication.get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE)
        try:
            return auth[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE)

    def authenticate(self, request):
        token = self.get_token(request)
        if not token:
            return None

        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[settings.JWT_ALGORITHM],
                options={'require_exp': True},
            )
        except JWTError as exc:
            logger.warning("Rejected token: %s", exc)
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE)

        claims = payload.get('user')
        user_id = claims.get('id') if isinstance(claims, dict) else None
        if not user_id:
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE)

        try:
            user = User.objects.get(pk=user_id)
        except (User.DoesNotExist, ValidationError, ValueError):
            logger.warning("Token references unknown user %s", user_id)
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE)

        if not user.is_active:
            raise exceptions.AuthenticationFailed(INVALID_TOKEN_MESSAGE)

        return (user, payload)

    def authenticate_header(self, request):
        return self.keyword


class PublicMethodsMixin:
    """
    Serve ``public_methods`` without authentication on an otherwise private view.

    Tokens sent on a public method are ignored, so a stale token stored by a
    client does not turn a public request into a 401.
    """

    public_methods = ()

    def get_permissions(self):
        if self.request.method in self.public_methods:
            return [permissions.AllowAny()]
        return super().get_permissions()

    def perform_authentication(self, request):
        if request.method in self.public_methods:
            request.authenticators = ()
        super().perform_authentication(request)
