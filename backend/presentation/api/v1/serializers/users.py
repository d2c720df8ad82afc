"""
User Serializers.
"""

from django.contrib.auth import authenticate, get_user_model
from rest_framework import serializers

from .base import BaseModelSerializer

User = get_user_model()


class LoginSerializer(serializers.Serializer):
    """Serializer for login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        username = attrs.get('username')
        password = attrs.get('password')

        if username and password:
            user = authenticate(
                request=self.context.get('request'),
                username=username,
                password=password
            )
            if not user:
                raise serializers.ValidationError(
                    'Неверный логин или пароль.',
                    code='authorization'
                )
            if not user.is_active:
                raise serializers.ValidationError(
                    'Учетная запись деактивирована.',
                    code='authorization'
                )
            attrs['user'] = user
        return attrs


class UserProfileSerializer(BaseModelSerializer):
    """Serializer for user profile (self)."""

    full_name = serializers.CharField(source='get_full_name', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email',
            'first_name', 'last_name', 'full_name',
            'is_active', 'is_staff', 'is_superuser',
            'date_joined', 'last_login',
        ]
        read_only_fields = fields
