# ============================================
# projects/serializers/project.py
# ============================================
from rest_framework import serializers
from accounts.serializers.user import UserBriefSerializer
from projects.models import Project, Sprint


class ProjectCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    project_manager = serializers.IntegerField(required=False, allow_null=True)
    frontend_devs = serializers.ListField(child=serializers.IntegerField(), required=False, default=list)
    backend_devs = serializers.ListField(child=serializers.IntegerField(), required=False, default=list)


class ProjectUpdateSerializer(serializers.Serializer):
    """All fields optional; only those present are written"""
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Project.ProjectStatus.choices, required=False)
    project_manager = serializers.IntegerField(required=False, allow_null=True)
    frontend_devs = serializers.ListField(child=serializers.IntegerField(), required=False)
    backend_devs = serializers.ListField(child=serializers.IntegerField(), required=False)


class ProjectMembersSerializer(serializers.Serializer):
    frontend_devs = serializers.ListField(child=serializers.IntegerField(), required=False)
    backend_devs = serializers.ListField(child=serializers.IntegerField(), required=False)

    def validate(self, attrs):
        if not attrs.get('frontend_devs') and not attrs.get('backend_devs'):
            raise serializers.ValidationError('No members provided')
        return attrs


class SprintBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Sprint
        fields = ['id', 'name', 'status', 'start_time', 'end_time']


class ProjectOutputSerializer(serializers.ModelSerializer):
    created_by = UserBriefSerializer(read_only=True)
    project_manager = UserBriefSerializer(read_only=True)
    frontend_devs = UserBriefSerializer(many=True, read_only=True)
    backend_devs = UserBriefSerializer(many=True, read_only=True)
    board_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'status',
            'created_by', 'project_manager', 'frontend_devs', 'backend_devs',
            'board_id', 'created_at', 'updated_at'
        ]


class ProjectDetailSerializer(ProjectOutputSerializer):
    sprints = SprintBriefSerializer(many=True, read_only=True)

    class Meta(ProjectOutputSerializer.Meta):
        fields = ProjectOutputSerializer.Meta.fields + ['sprints']
