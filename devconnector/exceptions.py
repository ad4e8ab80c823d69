"""
Domain errors and the REST framework exception handler.

Services raise the errors defined here; the handler turns them, and every
other API error, into the JSON bodies clients expect:

- domain errors and auth failures: {"msg": "..."}
- validation errors: {"errors": [{"msg": ..., "param": ..., "location": "body"}]}
- anything unexpected: an opaque {"msg": "Server Error"} with status 500
"""
import functools
import logging

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = 'Server Error'


class DevConnectorError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = SERVER_ERROR_MESSAGE

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(DevConnectorError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Not found'


class ProfileNotFound(NotFound):
    # Profile lookups answer 400, matching the public API clients depend on.
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'User profile not found!'


class PostNotFound(NotFound):
    default_message = 'Post not found'


class CommentNotFound(NotFound):
    default_message = 'Comment does not exist'


class GithubProfileNotFound(NotFound):
    default_message = 'No github profile found'


class Forbidden(DevConnectorError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'User not authorized'


class AlreadyLiked(DevConnectorError):
    default_message = 'Post already liked'


class NotLiked(DevConnectorError):
    default_message = 'Post has not yet been liked'


class UpstreamError(DevConnectorError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = 'GitHub request failed'


class StoreError(DevConnectorError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = SERVER_ERROR_MESSAGE


def store_operation(func):
    """
    Translate database failures raised by ``func`` into ``StoreError``.

    Domain errors pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as exc:
            logger.exception("Store operation %s failed", func.__qualname__)
            raise StoreError() from exc

    return wrapper


def flatten_validation_errors(detail, param=None):
    """
    Flatten a DRF ``ValidationError.detail`` into a list of error dicts.
    """
    errors = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            name = key if param is None else f"{param}.{key}"
            errors.extend(flatten_validation_errors(value, name))
    elif isinstance(detail, (list, tuple)):
        for item in detail:
            errors.extend(flatten_validation_errors(item, param))
    else:
        errors.append({
            'msg': str(detail),
            'param': param or 'non_field_errors',
            'location': 'body',
        })
    return errors


def api_exception_handler(exc, context):
    """
    REST framework EXCEPTION_HANDLER for the whole API.
    """
    if isinstance(exc, DevConnectorError):
        return Response({'msg': exc.message}, status=exc.status_code)

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {'errors': flatten_validation_errors(exc.detail)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, exceptions.NotAuthenticated):
            message = 'No token, authorization denied'
        elif isinstance(response.data, dict) and 'detail' in response.data:
            message = str(response.data['detail'])
        else:
            message = str(response.data)
        response.data = {'msg': message}
        return response

    view = context.get('view')
    logger.exception(
        "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view'
    )
    return Response(
        {'msg': SERVER_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
