# ============================================
# boards/serializers/board.py
# ============================================
from rest_framework import serializers
from accounts.serializers.user import UserBriefSerializer
from boards.models import Board, BoardList, Card


class BoardCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class BoardAddUsersSerializer(serializers.Serializer):
    user_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)


class BoardInviteResultSerializer(serializers.Serializer):
    invited = serializers.ListField(child=serializers.IntegerField())
    skipped = serializers.ListField(child=serializers.IntegerField())


class BoardOutputSerializer(serializers.ModelSerializer):
    created_by = UserBriefSerializer(read_only=True)
    members = UserBriefSerializer(many=True, read_only=True)
    invited_users = UserBriefSerializer(many=True, read_only=True)

    class Meta:
        model = Board
        fields = [
            'id', 'name', 'created_by', 'members', 'invited_users',
            'last_card_number', 'created_at', 'updated_at'
        ]


class BoardBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Board
        fields = ['id', 'name']


class ListCreateSerializer(serializers.Serializer):
    board_id = serializers.IntegerField()
    name = serializers.CharField(max_length=255)


class ListUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)


class CardSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Card
        fields = ['id', 'card_number', 'name', 'status']


class ListOutputSerializer(serializers.ModelSerializer):
    board_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = BoardList
        fields = ['id', 'name', 'board_id', 'created_at']


class ListWithCardsSerializer(serializers.ModelSerializer):
    cards = CardSummarySerializer(many=True, read_only=True)

    class Meta:
        model = BoardList
        fields = ['id', 'name', 'cards']
