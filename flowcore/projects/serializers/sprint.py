# ============================================
# projects/serializers/sprint.py
# ============================================
from rest_framework import serializers
from projects.models import Sprint


class SprintCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(choices=Sprint.SprintStatus.choices, required=False, default=Sprint.SprintStatus.TODO)
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()


class SprintUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Sprint.SprintStatus.choices, required=False)
    start_time = serializers.DateTimeField(required=False)
    end_time = serializers.DateTimeField(required=False)


class SprintOutputSerializer(serializers.ModelSerializer):
    project_id = serializers.IntegerField(read_only=True)
    created_by_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Sprint
        fields = [
            'id', 'project_id', 'name', 'description', 'status',
            'start_time', 'end_time', 'created_by_id', 'created_at', 'updated_at'
        ]
