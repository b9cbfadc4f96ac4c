# ============================================
# boards/views/card.py
# ============================================
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from boards.serializers.card import (
    CardCreateSerializer,
    CardUpdateSerializer,
    CardMembersSerializer,
    CardAttachmentsUploadSerializer,
    CardAttachmentsRemoveSerializer,
    CardOutputSerializer,
    CommentCreateSerializer,
    CommentUpdateSerializer,
    CommentOutputSerializer,
)
from boards.services.card import CardService
from boards.services.comment import CommentService
from core.config import get_config
from core.views.utils import (
    extend_schema, extend_schema_view, OpenApiResponse,
    path_int, responses_ok, std_errors,
)


def _service() -> CardService:
    return CardService(get_config())


CARD_ID = [path_int("card_id", "Card ID")]


@extend_schema_view(
    post=extend_schema(
        tags=["Card"],
        summary="Create a card in a list",
        description="The card takes the next number of its board (1, 2, 3 ...).",
        request=CardCreateSerializer,
        responses={**responses_ok(CardOutputSerializer, code=201), **std_errors()},
    )
)
class CardCreateAPIView(APIView):
    """
    POST: Create a card

    Request body:
    - list_id: int (required)
    - name: string (required)
    - description: string (optional)
    - due_date: datetime (optional)
    """

    def post(self, request):
        ser = CardCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        card = _service().create_card(actor=request.user, **ser.validated_data)
        return Response(CardOutputSerializer(card).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Card"], summary="Card details", parameters=CARD_ID,
        responses={**responses_ok(CardOutputSerializer), **std_errors()},
    ),
    patch=extend_schema(
        tags=["Card"],
        summary="Update a card",
        description=(
            "`assigned_users` replaces the assignees (board members only). "
            "`list_id` moves the card within its board. `due_date: null` clears the due date. "
            "A status change notifies every assignee."
        ),
        parameters=CARD_ID,
        request=CardUpdateSerializer,
        responses={**responses_ok(CardOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Card"], summary="Delete a card", parameters=CARD_ID,
        responses={204: OpenApiResponse(description="Deleted"), **std_errors()},
    ),
)
class CardDetailAPIView(APIView):
    def get(self, request, card_id):
        card = _service().get_card_details(card_id=card_id, actor=request.user)
        return Response(CardOutputSerializer(card).data)

    def patch(self, request, card_id):
        ser = CardUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        card = _service().update_card(card_id=card_id, actor=request.user, **ser.validated_data)
        return Response(CardOutputSerializer(card).data)

    def delete(self, request, card_id):
        _service().delete_card(card_id=card_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema_view(
    post=extend_schema(
        tags=["Card"],
        summary="Assign board members to a card",
        parameters=CARD_ID,
        request=CardMembersSerializer,
        responses={**responses_ok(CardOutputSerializer), **std_errors()},
    )
)
class CardAddMembersAPIView(APIView):
    def post(self, request, card_id):
        ser = CardMembersSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        card = _service().add_members(card_id=card_id, user_ids=ser.validated_data['user_ids'], actor=request.user)
        return Response(CardOutputSerializer(card).data)


@extend_schema_view(
    post=extend_schema(
        tags=["Card"],
        summary="Unassign users from a card",
        parameters=CARD_ID,
        request=CardMembersSerializer,
        responses={**responses_ok(CardOutputSerializer), **std_errors()},
    )
)
class CardRemoveMembersAPIView(APIView):
    def post(self, request, card_id):
        ser = CardMembersSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        card = _service().remove_members(card_id=card_id, user_ids=ser.validated_data['user_ids'], actor=request.user)
        return Response(CardOutputSerializer(card).data)


@extend_schema_view(
    post=extend_schema(
        tags=["Card"],
        summary="Upload image attachments (multipart, field `files`)",
        parameters=CARD_ID,
        request={"multipart/form-data": CardAttachmentsUploadSerializer},
        responses={**responses_ok(CardOutputSerializer), **std_errors()},
    )
)
class CardAttachmentsAPIView(APIView):
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request, card_id):
        files = request.FILES.getlist('files')
        ser = CardAttachmentsUploadSerializer(data={'files': files})
        ser.is_valid(raise_exception=True)
        card = _service().add_attachments(card_id=card_id, files=ser.validated_data['files'], actor=request.user)
        return Response(CardOutputSerializer(card).data)


@extend_schema_view(
    post=extend_schema(
        tags=["Card"],
        summary="Remove attachments by URL",
        parameters=CARD_ID,
        request=CardAttachmentsRemoveSerializer,
        responses={**responses_ok(CardOutputSerializer), **std_errors()},
    )
)
class CardAttachmentsRemoveAPIView(APIView):
    parser_classes = [JSONParser]

    def post(self, request, card_id):
        ser = CardAttachmentsRemoveSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        card = _service().remove_attachments(card_id=card_id, urls=ser.validated_data['urls'], actor=request.user)
        return Response(CardOutputSerializer(card).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Comment"], summary="Comments of a card", parameters=CARD_ID,
        responses={**responses_ok(CommentOutputSerializer, many=True), **std_errors()},
    ),
    post=extend_schema(
        tags=["Comment"], summary="Comment on a card", parameters=CARD_ID,
        request=CommentCreateSerializer,
        responses={**responses_ok(CommentOutputSerializer, code=201), **std_errors()},
    ),
)
class CommentListCreateAPIView(APIView):
    def get(self, request, card_id):
        comments = CommentService().list_comments(card_id=card_id, actor=request.user)
        return Response(CommentOutputSerializer(comments, many=True).data)

    def post(self, request, card_id):
        ser = CommentCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        comment = CommentService().add_comment(card_id=card_id, text=ser.validated_data['text'], actor=request.user)
        return Response(CommentOutputSerializer(comment).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    patch=extend_schema(
        tags=["Comment"], summary="Edit a comment (author, CEO or Manager)",
        parameters=[path_int("comment_id", "Comment ID")],
        request=CommentUpdateSerializer,
        responses={**responses_ok(CommentOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Comment"], summary="Delete a comment (author, CEO or Manager)",
        parameters=[path_int("comment_id", "Comment ID")],
        responses={204: OpenApiResponse(description="Deleted"), **std_errors()},
    ),
)
class CommentDetailAPIView(APIView):
    def patch(self, request, comment_id):
        ser = CommentUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        comment = CommentService().update_comment(comment_id=comment_id, text=ser.validated_data['text'], actor=request.user)
        return Response(CommentOutputSerializer(comment).data)

    def delete(self, request, comment_id):
        CommentService().delete_comment(comment_id=comment_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
