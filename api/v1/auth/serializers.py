"""
Authentication serializers for the Fellowship API.
"""
from django.contrib.auth import authenticate
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from apps.accounts.models import Profile


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model."""

    class Meta:
        model = User
        fields = ['id', 'email', 'first_name', 'last_name', 'date_joined']
        read_only_fields = ['id', 'email', 'date_joined']


class ProfileSerializer(serializers.ModelSerializer):
    """The member's own profile, including privacy settings."""
    user = UserSerializer(read_only=True)
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = Profile
        fields = [
            'id', 'user', 'phone', 'bio', 'role',
            'profile_visibility', 'phone_visibility', 'email_visibility',
            'display_name', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'role', 'created_at', 'updated_at']


class UserWithProfileSerializer(serializers.ModelSerializer):
    """User serializer with nested profile."""
    profile = ProfileSerializer(read_only=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'first_name', 'last_name', 'date_joined', 'profile']
        read_only_fields = ['id', 'email', 'date_joined']


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """JWT token serializer that uses email instead of username."""
    username_field = 'email'

    def validate(self, attrs):
        email = attrs.get('email')
        password = attrs.get('password')

        if not (email and password):
            raise serializers.ValidationError({
                'detail': 'Email and password are required.'
            })

        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            raise serializers.ValidationError({
                'detail': 'No account found with this email address.'
            })

        user = authenticate(
            request=self.context.get('request'),
            username=user.username,
            password=password
        )
        if not user:
            raise serializers.ValidationError({
                'detail': 'Invalid email or password.'
            })

        refresh = self.get_token(user)

        return {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
            'user': UserWithProfileSerializer(user).data
        }


class SignupSerializer(serializers.Serializer):
    """Serializer for member registration."""
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    first_name = serializers.CharField(required=True, max_length=150)
    last_name = serializers.CharField(required=True, max_length=150)

    def validate_email(self, value):
        """Ensure email is unique."""
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError(
                'An account with this email address already exists.'
            )
        return value.lower()

    def validate(self, attrs):
        """Ensure passwords match."""
        if attrs.get('password') != attrs.get('password_confirm'):
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match.'
            })
        return attrs

    def create(self, validated_data):
        """Create a new member; the profile is created by a post_save signal."""
        validated_data.pop('password_confirm')
        email = validated_data.pop('email')

        return User.objects.create_user(
            username=email,  # Use email as username
            email=email,
            password=validated_data.pop('password'),
            first_name=validated_data['first_name'],
            last_name=validated_data['last_name']
        )


class PasswordChangeSerializer(serializers.Serializer):
    """Serializer for changing password."""
    old_password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
    new_password = serializers.CharField(
        required=True,
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    new_password_confirm = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )

    def validate_old_password(self, value):
        """Verify old password is correct."""
        user = self.context['request'].user
        if not user.check_password(value):
            raise serializers.ValidationError('Current password is incorrect.')
        return value

    def validate(self, attrs):
        """Ensure new passwords match."""
        if attrs.get('new_password') != attrs.get('new_password_confirm'):
            raise serializers.ValidationError({
                'new_password_confirm': 'Passwords do not match.'
            })
        return attrs


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """Update the member's own profile. Role is not writable here."""
    first_name = serializers.CharField(required=False, max_length=150)
    last_name = serializers.CharField(required=False, max_length=150)

    class Meta:
        model = Profile
        fields = [
            'first_name', 'last_name', 'phone', 'bio',
            'profile_visibility', 'phone_visibility', 'email_visibility',
        ]

    def update(self, instance, validated_data):
        # Extract user fields
        first_name = validated_data.pop('first_name', None)
        last_name = validated_data.pop('last_name', None)

        if first_name is not None or last_name is not None:
            user = instance.user
            if first_name is not None:
                user.first_name = first_name
            if last_name is not None:
                user.last_name = last_name
            user.save(update_fields=['first_name', 'last_name'])

        return super().update(instance, validated_data)

    def to_representation(self, instance):
        return ProfileSerializer(instance, context=self.context).data
