# ============================================
# boards/serializers/card.py
# ============================================
from rest_framework import serializers
from accounts.serializers.user import UserBriefSerializer
from boards.models import Card, Comment


class CardCreateSerializer(serializers.Serializer):
    list_id = serializers.IntegerField()
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    due_date = serializers.DateTimeField(required=False, allow_null=True, default=None)


class CardUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    assigned_users = serializers.ListField(child=serializers.IntegerField(), required=False)
    list_id = serializers.IntegerField(required=False)
    due_date = serializers.DateTimeField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=Card.CardStatus.choices, required=False)


class CardMembersSerializer(serializers.Serializer):
    user_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)


class CardAttachmentsUploadSerializer(serializers.Serializer):
    files = serializers.ListField(child=serializers.FileField(), allow_empty=False)


class CardAttachmentsRemoveSerializer(serializers.Serializer):
    # exact match against the URLs the storage returned
    urls = serializers.ListField(child=serializers.CharField(), allow_empty=False)


class CardOutputSerializer(serializers.ModelSerializer):
    list_id = serializers.IntegerField(source='board_list_id', read_only=True)
    board_id = serializers.IntegerField(source='board_list.board_id', read_only=True)
    assigned_users = UserBriefSerializer(many=True, read_only=True)
    created_by = UserBriefSerializer(read_only=True)

    class Meta:
        model = Card
        fields = [
            'id', 'card_number', 'name', 'description', 'status',
            'list_id', 'board_id', 'assigned_users', 'created_by',
            'due_date', 'attachments', 'created_at', 'updated_at'
        ]


class CommentCreateSerializer(serializers.Serializer):
    text = serializers.CharField()


class CommentUpdateSerializer(serializers.Serializer):
    text = serializers.CharField()


class CommentOutputSerializer(serializers.ModelSerializer):
    comment_by = UserBriefSerializer(read_only=True)
    card_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'card_id', 'comment_by', 'text', 'time', 'updated_at']
