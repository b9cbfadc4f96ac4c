# ============================================
# boards/views/board.py
# ============================================
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers.user import UserBriefSerializer
from boards.serializers.board import (
    BoardCreateSerializer,
    BoardAddUsersSerializer,
    BoardInviteResultSerializer,
    BoardOutputSerializer,
    BoardBriefSerializer,
    ListCreateSerializer,
    ListUpdateSerializer,
    ListOutputSerializer,
    ListWithCardsSerializer,
)
from boards.services.board import BoardService
from core.config import get_config
from core.views.utils import (
    extend_schema, extend_schema_view, OpenApiResponse,
    MessageSerializer, path_int, responses_ok, std_errors,
)


def _service() -> BoardService:
    return BoardService(get_config())


@extend_schema_view(
    post=extend_schema(
        tags=["Board"],
        summary="Create a board (CEO/Manager)",
        request=BoardCreateSerializer,
        responses={**responses_ok(BoardOutputSerializer, code=201), **std_errors()},
    )
)
class BoardCreateAPIView(APIView):
    """
    POST: Create a board; the creator becomes a member

    Request body:
    - name: string (required)
    """

    def post(self, request):
        ser = BoardCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        board = _service().create_board(name=ser.validated_data['name'], actor=request.user)
        return Response(BoardOutputSerializer(board).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(
        tags=["Board"],
        summary="Boards the current user is a member of",
        responses={**responses_ok(BoardBriefSerializer, many=True), **std_errors()},
    )
)
class MyBoardsAPIView(APIView):
    def get(self, request):
        boards = _service().get_my_boards(actor=request.user)
        return Response(BoardBriefSerializer(boards, many=True).data)


@extend_schema_view(
    post=extend_schema(
        tags=["Board"],
        summary="Invite users to a board (CEO/Manager)",
        description="Members and already invited users are skipped. Each invitee receives an accept link valid 24h.",
        parameters=[path_int("board_id", "Board ID")],
        request=BoardAddUsersSerializer,
        responses={**responses_ok(BoardInviteResultSerializer), **std_errors()},
    )
)
class BoardAddUsersAPIView(APIView):
    """
    POST: Invite users

    Request body:
    - user_ids: list of int (no duplicates, all must exist)
    """

    def post(self, request, board_id):
        ser = BoardAddUsersSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        result = _service().add_users(board_id=board_id, user_ids=ser.validated_data['user_ids'], actor=request.user)
        return Response(result)


@extend_schema_view(
    get=extend_schema(
        tags=["Board"],
        summary="Accept a board invitation (link from the email)",
        parameters=[path_int("board_id", "Board ID")],
        responses={**responses_ok(MessageSerializer), **std_errors()},
    )
)
class AcceptInvitationAPIView(APIView):
    authentication_classes = []
    permission_classes = []

    def get(self, request, board_id, token):
        board = _service().accept_invitation(board_id=board_id, token=token)
        return Response({'message': f'Invitation accepted. You are now a member of {board.name}'})


@extend_schema_view(
    get=extend_schema(
        tags=["Board"],
        summary="Board members (id, name, email)",
        parameters=[path_int("board_id", "Board ID")],
        responses={**responses_ok(UserBriefSerializer, many=True), **std_errors()},
    )
)
class BoardMembersAPIView(APIView):
    def get(self, request, board_id):
        members = _service().get_board_members(board_id=board_id, actor=request.user)
        return Response(UserBriefSerializer(members, many=True).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Board"],
        summary="Lists of a board with their cards",
        parameters=[path_int("board_id", "Board ID")],
        responses={**responses_ok(ListWithCardsSerializer, many=True), **std_errors()},
    )
)
class BoardListsAPIView(APIView):
    def get(self, request, board_id):
        lists = _service().get_board_lists(board_id=board_id, actor=request.user)
        return Response(ListWithCardsSerializer(lists, many=True).data)


@extend_schema_view(
    post=extend_schema(
        tags=["Board List"],
        summary="Create a list on a board",
        request=ListCreateSerializer,
        responses={**responses_ok(ListOutputSerializer, code=201), **std_errors()},
    )
)
class ListCreateAPIView(APIView):
    def post(self, request):
        ser = ListCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        board_list = _service().create_list(board_id=data['board_id'], name=data['name'], actor=request.user)
        return Response(ListOutputSerializer(board_list).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    patch=extend_schema(
        tags=["Board List"],
        summary="Rename a list",
        parameters=[path_int("list_id", "List ID")],
        request=ListUpdateSerializer,
        responses={**responses_ok(ListOutputSerializer), **std_errors()},
    ),
    delete=extend_schema(
        tags=["Board List"],
        summary="Delete a list and its cards",
        parameters=[path_int("list_id", "List ID")],
        responses={204: OpenApiResponse(description="Deleted"), **std_errors()},
    ),
)
class ListDetailAPIView(APIView):
    def patch(self, request, list_id):
        ser = ListUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        board_list = _service().update_list(list_id=list_id, name=ser.validated_data['name'], actor=request.user)
        return Response(ListOutputSerializer(board_list).data)

    def delete(self, request, list_id):
        _service().delete_list(list_id=list_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
