"""
Profiles app serializers

Output serializer for Profile plus input validation for profile upserts and
experience/education entries.
"""
from rest_framework import serializers

from accounts.models import User
from .models import Profile
from .services import ProfileService


class ProfileOwnerSerializer(serializers.ModelSerializer):
    """Public slice of the owning user."""

    class Meta:
        model = User
        fields = ['id', 'name', 'avatar']
        read_only_fields = fields


class ProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for Profile.

    The owner is embedded with name and avatar only.
    """

    user = ProfileOwnerSerializer(read_only=True)

    class Meta:
        model = Profile
        fields = [
            'id',
            'user',
            'company',
            'website',
            'location',
            'status',
            'skills',
            'bio',
            'githubusername',
            'experience',
            'education',
            'social',
            'date',
        ]
        read_only_fields = fields


class SkillsField(serializers.Field):
    """Accepts ``"html, css, js"`` or a list and yields the cleaned list."""

    default_error_messages = {
        'required': 'Skills are required',
        'null': 'Skills are required',
        'empty': 'Skills are required',
    }

    def to_internal_value(self, data):
        skills = ProfileService.parse_skills(data)
        if not skills:
            self.fail('empty')
        return skills

    def to_representation(self, value):
        return value


def optional_text():
    return serializers.CharField(required=False, allow_blank=True)


class ProfileInputSerializer(serializers.Serializer):
    """Validate a create-or-update profile request."""

    status = serializers.CharField(
        error_messages={
            'required': 'Status is required',
            'blank': 'Status is required',
            'null': 'Status is required',
        },
    )
    skills = SkillsField()
    company = optional_text()
    website = optional_text()
    location = optional_text()
    bio = optional_text()
    githubusername = optional_text()
    youtube = optional_text()
    twitter = optional_text()
    facebook = optional_text()
    linkedin = optional_text()
    instagram = optional_text()


class ProfileEntrySerializer(serializers.Serializer):
    """
    Fields shared by experience and education entries.

    ``from`` and ``to`` are Python keywords, so they are added in
    ``get_fields`` instead of being declared on the class.
    """

    current = serializers.BooleanField(default=False)
    description = serializers.CharField(required=False, allow_blank=True)

    def get_fields(self):
        fields = super().get_fields()
        fields['from'] = serializers.DateField(
            error_messages={
                'required': 'From date is required',
                'null': 'From date is required',
                'invalid': 'From date must be a valid date',
            },
        )
        fields['to'] = serializers.DateField(
            required=False,
            allow_null=True,
            default=None,
            error_messages={'invalid': 'To date must be a valid date'},
        )
        return fields


class ExperienceSerializer(ProfileEntrySerializer):
    title = serializers.CharField(
        error_messages={
            'required': 'Title is required',
            'blank': 'Title is required',
            'null': 'Title is required',
        },
    )
    company = serializers.CharField(
        error_messages={
            'required': 'Company is required',
            'blank': 'Company is required',
            'null': 'Company is required',
        },
    )
    location = serializers.CharField(required=False, allow_blank=True)


class EducationSerializer(ProfileEntrySerializer):
    school = serializers.CharField(
        error_messages={
            'required': 'School is required',
            'blank': 'School is required',
            'null': 'School is required',
        },
    )
    degree = serializers.CharField(
        error_messages={
            'required': 'Degree is required',
            'blank': 'Degree is required',
            'null': 'Degree is required',
        },
    )
    fieldofstudy = serializers.CharField(
        error_messages={
            'required': 'Field of study is required',
            'blank': 'Field of study is required',
            'null': 'Field of study is required',
        },
    )
