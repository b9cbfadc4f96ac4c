# ============================================
# accounts/serializers/auth.py
# ============================================
from rest_framework import serializers
from accounts.models import User


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    type = serializers.ChoiceField(choices=User.Role.choices)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    type = serializers.ChoiceField(choices=User.Role.choices)


class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()


class ResetPasswordSerializer(serializers.Serializer):
    token = serializers.CharField()
    new_password = serializers.CharField(min_length=6, write_only=True)


class TokenOutputSerializer(serializers.Serializer):
    message = serializers.CharField()
    access_token = serializers.CharField()
