"""
Accounts app serializers

Serializers for User model and authentication.
"""
from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model.

    Never exposes the password hash.
    """

    date = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'name',
            'email',
            'avatar',
            'date',
        ]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Validate a registration request and create the user."""

    name = serializers.CharField(
        error_messages={
            'required': 'Name is required',
            'blank': 'Name is required',
            'null': 'Name is required',
        },
    )
    email = serializers.EmailField(
        error_messages={
            'required': 'Please include a valid email',
            'blank': 'Please include a valid email',
            'invalid': 'Please include a valid email',
        },
    )
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        trim_whitespace=False,
        error_messages={
            'required': 'Please enter a password with 6 or more characters',
            'blank': 'Please enter a password with 6 or more characters',
            'min_length': 'Please enter a password with 6 or more characters',
        },
    )

    def validate_email(self, value):
        value = User.objects.normalize_email(value)
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('User already exists')
        return value

    def create(self, validated_data):
        """Create user with hashed password and Gravatar avatar."""
        return User.objects.create_user(
            email=validated_data['email'],
            password=validated_data['password'],
            name=validated_data['name'],
        )


class LoginSerializer(serializers.Serializer):
    """Validate login credentials; ``validated_data['user']`` holds the match."""

    email = serializers.EmailField(
        error_messages={
            'required': 'Please include a valid email',
            'blank': 'Please include a valid email',
            'invalid': 'Please include a valid email',
        },
    )
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={
            'required': 'Password is required',
            'blank': 'Password is required',
        },
    )

    def validate(self, attrs):
        user = User.objects.filter(email__iexact=attrs['email']).first()
        # Same message for unknown email and wrong password.
        if user is None or not user.is_active or not user.check_password(attrs['password']):
            raise serializers.ValidationError('Invalid Credentials')
        attrs['user'] = user
        return attrs
