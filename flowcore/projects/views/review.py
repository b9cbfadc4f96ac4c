# ============================================
# projects/views/review.py
# ============================================
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.views.utils import (
    extend_schema, extend_schema_view,
    q_int, responses_ok, std_errors,
)
from projects.serializers.review import ReviewCreateSerializer, ReviewOutputSerializer
from projects.services.review import ReviewService


def _optional_int(request, name):
    value = request.query_params.get(name)
    if value in (None, ''):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@extend_schema_view(
    post=extend_schema(
        tags=["Review"],
        summary="Review a project or a user (CEO/Manager)",
        description="Exactly one of `project_id` / `user_id` must be given.",
        request=ReviewCreateSerializer,
        responses={**responses_ok(ReviewOutputSerializer, code=201), **std_errors()},
    )
)
class ReviewCreateAPIView(APIView):
    def post(self, request):
        ser = ReviewCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        review = ReviewService().create_review(actor=request.user, **ser.validated_data)
        return Response(ReviewOutputSerializer(review).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Review"], summary="Project reviews (CEO/Manager)",
        parameters=[q_int("project_id", "Filter by project")],
        responses={**responses_ok(ReviewOutputSerializer, many=True), **std_errors()},
    )
)
class ProjectReviewsAPIView(APIView):
    def get(self, request):
        reviews = ReviewService().list_project_reviews(
            actor=request.user, project_id=_optional_int(request, 'project_id')
        )
        return Response(ReviewOutputSerializer(reviews, many=True).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Review"], summary="User reviews (CEO/Manager)",
        parameters=[q_int("user_id", "Filter by reviewed user")],
        responses={**responses_ok(ReviewOutputSerializer, many=True), **std_errors()},
    )
)
class UserReviewsAPIView(APIView):
    def get(self, request):
        reviews = ReviewService().list_user_reviews(
            actor=request.user, user_id=_optional_int(request, 'user_id')
        )
        return Response(ReviewOutputSerializer(reviews, many=True).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Review"], summary="Reviews about me",
        responses={**responses_ok(ReviewOutputSerializer, many=True), **std_errors()},
    )
)
class MyReviewsAPIView(APIView):
    def get(self, request):
        reviews = ReviewService().my_reviews(actor=request.user)
        return Response(ReviewOutputSerializer(reviews, many=True).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Review"], summary="Reviews of the projects I am linked to",
        responses={**responses_ok(ReviewOutputSerializer, many=True), **std_errors()},
    )
)
class MyProjectReviewsAPIView(APIView):
    def get(self, request):
        reviews = ReviewService().my_project_reviews(actor=request.user)
        return Response(ReviewOutputSerializer(reviews, many=True).data)
