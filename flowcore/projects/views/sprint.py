# ============================================
# projects/views/sprint.py
# ============================================
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.views.utils import (
    extend_schema, extend_schema_view, OpenApiResponse,
    path_int, responses_ok, std_errors,
)
from projects.serializers.sprint import (
    SprintCreateSerializer,
    SprintUpdateSerializer,
    SprintOutputSerializer,
)
from projects.services.sprint import SprintService

SPRINT_ID = [path_int("sprint_id", "Sprint ID")]


@extend_schema_view(
    get=extend_schema(
        tags=["Sprint"], summary="Sprints of a project",
        parameters=[path_int("project_id", "Project ID")],
        responses={**responses_ok(SprintOutputSerializer, many=True), **std_errors()},
    ),
    post=extend_schema(
        tags=["Sprint"], summary="Create a sprint (CEO, Manager, or the project manager)",
        parameters=[path_int("project_id", "Project ID")],
        request=SprintCreateSerializer,
        responses={**responses_ok(SprintOutputSerializer, code=201), **std_errors()},
    ),
)
class SprintListCreateAPIView(APIView):
    def get(self, request, project_id):
        sprints = SprintService().find_all_by_project(project_id=project_id)
        return Response(SprintOutputSerializer(sprints, many=True).data)

    def post(self, request, project_id):
        ser = SprintCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        sprint = SprintService().create_sprint(project_id=project_id, actor=request.user, **ser.validated_data)
        return Response(SprintOutputSerializer(sprint).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Sprint"], summary="Sprint details", parameters=SPRINT_ID,
        responses={**responses_ok(SprintOutputSerializer), **std_errors()},
    ),
    patch=extend_schema(
        tags=["Sprint"], summary="Update a sprint", parameters=SPRINT_ID,
        request=SprintUpdateSerializer,
        responses={**responses_ok(SprintOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Sprint"], summary="Delete a sprint", parameters=SPRINT_ID,
        responses={204: OpenApiResponse(description="Deleted"), **std_errors()},
    ),
)
class SprintDetailAPIView(APIView):
    def get(self, request, sprint_id):
        sprint = SprintService().get_sprint(sprint_id=sprint_id)
        return Response(SprintOutputSerializer(sprint).data)

    def patch(self, request, sprint_id):
        ser = SprintUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        sprint = SprintService().update_sprint(sprint_id=sprint_id, actor=request.user, **ser.validated_data)
        return Response(SprintOutputSerializer(sprint).data)

    def delete(self, request, sprint_id):
        SprintService().delete_sprint(sprint_id=sprint_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
