from rest_framework import generics
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView
from rest_framework_simplejwt.settings import api_settings
from utils.response import success_response
from .serializers import UserSerializer, UserLoginSerializer


class LoginView(APIView):
    """
    Staff login, returns a JWT pair
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserLoginSerializer(data=request.data, context={'request': request})
        # validation errors are rendered by the global exception handler
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']

        refresh = RefreshToken.for_user(user)
        response_data = {
            'token': str(refresh.access_token),
            'refresh_token': str(refresh),
            'user': UserSerializer(user).data,
            'expires_in': int(api_settings.ACCESS_TOKEN_LIFETIME.total_seconds()),
        }
        return success_response(data=response_data, message='Login berhasil')


class RefreshTokenView(TokenRefreshView):
    """
    Refresh the access token and rotate the refresh token
    """
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        token_data = serializer.validated_data
        response_data = {
            'token': token_data.get('access'),
            'refresh_token': token_data.get('refresh') or request.data.get('refresh'),
            'expires_in': int(api_settings.ACCESS_TOKEN_LIFETIME.total_seconds()),
        }
        return success_response(data=response_data, message='Token diperbarui')


class UpdateRetrieveUser(generics.RetrieveUpdateAPIView):
    """Current staff account"""
    permission_classes = [IsAuthenticated]
    serializer_class = UserSerializer

    def get_object(self):
        return self.request.user

    def retrieve(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_object()).data)

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return success_response(serializer.data, 'Profil diperbarui')
