"""
Authentication views for the Fellowship API.
"""
import logging

from rest_framework import status, generics
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, OpenApiExample

from .serializers import (
    CustomTokenObtainPairSerializer,
    SignupSerializer,
    UserWithProfileSerializer,
    PasswordChangeSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer,
)

logger = logging.getLogger(__name__)


class LoginView(TokenObtainPairView):
    """
    Login endpoint - obtain JWT access and refresh tokens.

    Returns tokens and user profile data.
    """
    permission_classes = [AllowAny]
    serializer_class = CustomTokenObtainPairSerializer

    @extend_schema(
        summary="Login with email and password",
        description="Authenticate with email and password to receive JWT tokens.",
        examples=[
            OpenApiExample(
                'Login Request',
                value={
                    'email': 'member@example.com',
                    'password': 'securepassword'
                },
                request_only=True
            )
        ],
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


class SignupView(generics.CreateAPIView):
    """
    Register a new member account.

    Creates user and profile, returns tokens for immediate login.
    """
    permission_classes = [AllowAny]
    serializer_class = SignupSerializer

    @extend_schema(
        summary="Create a new member account",
        description="Register with name, email and password. Returns JWT tokens for immediate login.",
        examples=[
            OpenApiExample(
                'Signup Request',
                value={
                    'email': 'newmember@example.com',
                    'password': 'securepassword123',
                    'password_confirm': 'securepassword123',
                    'first_name': 'Ruth',
                    'last_name': 'Miller'
                },
                request_only=True
            )
        ]
    )
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        # Generate tokens for immediate login
        refresh = RefreshToken.for_user(user)

        logger.info(f"New member signed up: {user.email}")
        return Response({
            'message': 'Account created successfully.',
            'access': str(refresh.access_token),
            'refresh': str(refresh),
            'user': UserWithProfileSerializer(user).data
        }, status=status.HTTP_201_CREATED)


class LogoutView(APIView):
    """
    Logout - blacklist the refresh token.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Logout and invalidate tokens",
        description="Blacklist the refresh token to log out.",
        request={
            'type': 'object',
            'properties': {
                'refresh': {'type': 'string', 'description': 'Refresh token to blacklist'}
            }
        }
    )
    def post(self, request):
        refresh_token = request.data.get('refresh')
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                return Response({'message': str(e), 'error': 'invalid_token'}, status=status.HTTP_400_BAD_REQUEST)
        return Response({'message': 'Logged out successfully.'}, status=status.HTTP_200_OK)


class TokenRefreshAPIView(TokenRefreshView):
    """
    Refresh access token using refresh token.
    """

    @extend_schema(
        summary="Refresh access token",
        description="Use a valid refresh token to obtain a new access token."
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


class CurrentUserView(APIView):
    """
    Get current authenticated member with profile.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get current member",
        responses=UserWithProfileSerializer
    )
    def get(self, request):
        serializer = UserWithProfileSerializer(request.user)
        return Response(serializer.data)


class ProfileView(generics.RetrieveUpdateAPIView):
    """
    Get or update the member's own profile and privacy settings.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = ProfileSerializer
    http_method_names = ['get', 'patch', 'put', 'head', 'options']

    def get_object(self):
        return self.request.user.profile

    def get_serializer_class(self):
        if self.request.method in ['PUT', 'PATCH']:
            return ProfileUpdateSerializer
        return ProfileSerializer

    @extend_schema(summary="Get own profile")
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(summary="Update own profile")
    def put(self, request, *args, **kwargs):
        return super().put(request, *args, **kwargs)

    @extend_schema(summary="Partially update own profile")
    def patch(self, request, *args, **kwargs):
        return super().patch(request, *args, **kwargs)


class PasswordChangeView(APIView):
    """
    Change password for authenticated member.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Change password",
        request=PasswordChangeSerializer
    )
    def post(self, request):
        serializer = PasswordChangeSerializer(
            data=request.data,
            context={'request': request}
        )
        serializer.is_valid(raise_exception=True)

        request.user.set_password(serializer.validated_data['new_password'])
        request.user.save()

        return Response({'message': 'Password changed successfully.'})
