"""
Profiles app views

Profile CRUD, experience/education entries and the GitHub repository proxy.
"""
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import PublicMethodsMixin

from .serializers import (
    EducationSerializer,
    ExperienceSerializer,
    ProfileInputSerializer,
    ProfileSerializer,
)
from .services import GithubService, ProfileService


class ProfileView(PublicMethodsMixin, APIView):
    """
    GET /api/profile    - List all profiles (public)
    POST /api/profile   - Create or update the current user's profile
    DELETE /api/profile - Delete the current user's posts, profile and account
    """

    public_methods = ('GET', 'HEAD')

    def get(self, request):
        profiles = ProfileService.get_all()
        return Response(ProfileSerializer(profiles, many=True).data)

    def post(self, request):
        serializer = ProfileInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = ProfileService.upsert(request.user, serializer.validated_data)
        return Response(ProfileSerializer(profile).data)

    def delete(self, request):
        ProfileService.delete_cascade(request.user)
        return Response({'msg': 'User deleted'})


class MyProfileView(APIView):
    """
    GET /api/profile/me - The current user's profile
    """

    def get(self, request):
        profile = ProfileService.get_by_owner(request.user.pk)
        return Response(ProfileSerializer(profile).data)


class UserProfileView(APIView):
    """
    GET /api/profile/user/{user_id} - Profile by owner id (public)
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, user_id):
        profile = ProfileService.get_by_owner(user_id)
        return Response(ProfileSerializer(profile).data)


class ExperienceView(APIView):
    """
    PUT /api/profile/experience - Add an experience entry
    """

    def put(self, request):
        serializer = ExperienceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = ProfileService.add_experience(request.user, serializer.validated_data)
        return Response(ProfileSerializer(profile).data)


class ExperienceDetailView(APIView):
    """
    DELETE /api/profile/experience/{entry_id} - Remove an experience entry
    """

    def delete(self, request, entry_id):
        profile = ProfileService.remove_experience(request.user, entry_id)
        return Response(ProfileSerializer(profile).data)


class EducationView(APIView):
    """
    PUT /api/profile/education - Add an education entry
    """

    def put(self, request):
        serializer = EducationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        profile = ProfileService.add_education(request.user, serializer.validated_data)
        return Response(ProfileSerializer(profile).data)


class EducationDetailView(APIView):
    """
    DELETE /api/profile/education/{entry_id} - Remove an education entry
    """

    def delete(self, request, entry_id):
        profile = ProfileService.remove_education(request.user, entry_id)
        return Response(ProfileSerializer(profile).data)


class GithubReposView(APIView):
    """
    GET /api/profile/github/{username} - Latest GitHub repositories (public)
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, username):
        return Response(GithubService.list_repos(username))
