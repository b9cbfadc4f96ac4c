# ============================================
# accounts/serializers/user.py
# ============================================
from rest_framework import serializers
from accounts.models import User


class UserBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email']


class UserOutputSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='role', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'type', 'created_at']
