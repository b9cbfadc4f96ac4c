# ============================================
# projects/serializers/review.py
# ============================================
from rest_framework import serializers
from accounts.serializers.user import UserBriefSerializer
from projects.models import Review


class ReviewCreateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(required=False, allow_blank=True, default='')
    project_id = serializers.IntegerField(required=False, allow_null=True)
    user_id = serializers.IntegerField(required=False, allow_null=True)


class ReviewOutputSerializer(serializers.ModelSerializer):
    reviewed_by = UserBriefSerializer(read_only=True)
    user = UserBriefSerializer(read_only=True)
    project_id = serializers.IntegerField(read_only=True)
    project_name = serializers.CharField(source='project.name', read_only=True, default=None)

    class Meta:
        model = Review
        fields = [
            'id', 'rating', 'comment', 'review_type',
            'reviewed_by', 'user', 'project_id', 'project_name', 'created_at'
        ]
