# ============================================
# projects/views/project.py
# ============================================
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.config import get_config
from core.views.utils import (
    extend_schema, extend_schema_view, OpenApiResponse,
    path_int, responses_ok, std_errors,
)
from projects.serializers.project import (
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
    ProjectMembersSerializer,
    ProjectOutputSerializer,
    ProjectDetailSerializer,
)
from projects.services.project import ProjectService


def _service() -> ProjectService:
    return ProjectService(get_config())


PROJECT_ID = [path_int("project_id", "Project ID")]


@extend_schema_view(
    get=extend_schema(
        tags=["Project"],
        summary="All projects (CEO/Manager)",
        responses={**responses_ok(ProjectOutputSerializer, many=True), **std_errors()},
    ),
    post=extend_schema(
        tags=["Project"],
        summary="Create a project and its board (CEO/Manager)",
        description=(
            "Creates a board with the project's name. The creator becomes a board member; "
            "the project manager and developers receive board invitations."
        ),
        request=ProjectCreateSerializer,
        responses={**responses_ok(ProjectOutputSerializer, code=201), **std_errors()},
    ),
)
class ProjectListCreateAPIView(APIView):
    """
    GET: List all projects
    POST: Create a project

    Request body (POST):
    - name: string (required)
    - description: string (optional)
    - project_manager: int (optional)
    - frontend_devs: list of int (optional)
    - backend_devs: list of int (optional)
    """

    def get(self, request):
        projects = _service().find_all(actor=request.user)
        return Response(ProjectOutputSerializer(projects, many=True).data)

    def post(self, request):
        ser = ProjectCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        project = _service().create_project(actor=request.user, **ser.validated_data)
        return Response(ProjectOutputSerializer(project).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Project"],
        summary="Projects I created, manage, or develop on",
        responses={**responses_ok(ProjectOutputSerializer, many=True), **std_errors()},
    )
)
class MyProjectsAPIView(APIView):
    def get(self, request):
        projects = _service().find_my_projects(actor=request.user)
        return Response(ProjectOutputSerializer(projects, many=True).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Project"], summary="Project details with sprints", parameters=PROJECT_ID,
        responses={**responses_ok(ProjectDetailSerializer), **std_errors()},
    ),
    patch=extend_schema(
        tags=["Project"], summary="Update a project (CEO/Manager)", parameters=PROJECT_ID,
        request=ProjectUpdateSerializer,
        responses={**responses_ok(ProjectOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Project"], summary="Delete a project (CEO/Manager)", parameters=PROJECT_ID,
        responses={204: OpenApiResponse(description="Deleted"), **std_errors()},
    ),
)
class ProjectDetailAPIView(APIView):
    def get(self, request, project_id):
        project = _service().get_project(project_id=project_id)
        return Response(ProjectDetailSerializer(project).data)

    def patch(self, request, project_id):
        ser = ProjectUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        project = _service().update_project(project_id=project_id, actor=request.user, **ser.validated_data)
        return Response(ProjectOutputSerializer(project).data)

    def delete(self, request, project_id):
        _service().delete_project(project_id=project_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema_view(
    post=extend_schema(
        tags=["Project"],
        summary="Add developers (CEO/Manager)",
        description="New members are emailed and invited to the project's board.",
        parameters=PROJECT_ID,
        request=ProjectMembersSerializer,
        responses={**responses_ok(ProjectOutputSerializer), **std_errors()},
    )
)
class ProjectAddMembersAPIView(APIView):
    def post(self, request, project_id):
        ser = ProjectMembersSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        project = _service().add_members(project_id=project_id, actor=request.user, **ser.validated_data)
        return Response(ProjectOutputSerializer(project).data)


@extend_schema_view(
    post=extend_schema(
        tags=["Project"],
        summary="Remove developers (CEO/Manager)",
        description="Removed members are emailed. Board membership is not changed.",
        parameters=PROJECT_ID,
        request=ProjectMembersSerializer,
        responses={**responses_ok(ProjectOutputSerializer), **std_errors()},
    )
)
class ProjectRemoveMembersAPIView(APIView):
    def post(self, request, project_id):
        ser = ProjectMembersSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        project = _service().remove_members(project_id=project_id, actor=request.user, **ser.validated_data)
        return Response(ProjectOutputSerializer(project).data)
