"""
Accounts app views

Registration, login and the current-user endpoint.
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .authentication import PublicMethodsMixin, create_access_token
from .serializers import LoginSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    """
    Register a user and return a signed token.

    POST /api/users
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered user %s", user.pk)
        return Response({'token': create_access_token(user)}, status=status.HTTP_200_OK)


class AuthView(PublicMethodsMixin, APIView):
    """
    GET /api/auth  - Current user (token required)
    POST /api/auth - Log in and return a signed token (public)
    """

    public_methods = ('POST',)

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']
        logger.info("User %s logged in", user.pk)
        return Response({'token': create_access_token(user)})
