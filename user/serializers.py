from rest_framework import serializers
from django.contrib.auth import get_user_model


class UserSerializer(serializers.ModelSerializer):
    """Staff account serializer"""

    class Meta:
        model = get_user_model()
        fields = ['id', 'email', 'full_name', 'role', 'is_active', 'created_at', 'updated_at']
        read_only_fields = ['id', 'email', 'role', 'is_active', 'created_at', 'updated_at']


class UserLoginSerializer(serializers.Serializer):
    """Login serializer"""
    email = serializers.EmailField(required=True, help_text='Email')
    password = serializers.CharField(required=True, write_only=True, help_text='Kata sandi')

    def validate(self, attrs):
        email = get_user_model().objects.normalize_email(attrs.get('email'))
        password = attrs.get('password')

        user = get_user_model().objects.filter(email=email).first()
        if not user or not user.check_password(password):
            raise serializers.ValidationError({'password': 'Email atau kata sandi salah'})
        if not user.is_active:
            raise serializers.ValidationError({'email': 'Akun dinonaktifkan, hubungi administrator'})

        attrs['user'] = user
        return attrs
