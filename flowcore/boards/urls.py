# ============================================
# boards/urls.py
# ============================================
from django.urls import path
from boards.views.board import (
    BoardCreateAPIView,
    MyBoardsAPIView,
    BoardAddUsersAPIView,
    AcceptInvitationAPIView,
    BoardMembersAPIView,
    BoardListsAPIView,
    ListCreateAPIView,
    ListDetailAPIView,
)
from boards.views.card import (
    CardCreateAPIView,
    CardDetailAPIView,
    CardAddMembersAPIView,
    CardRemoveMembersAPIView,
    CardAttachmentsAPIView,
    CardAttachmentsRemoveAPIView,
    CommentListCreateAPIView,
    CommentDetailAPIView,
)

app_name = 'boards'

urlpatterns = [
    # Boards
    path('create/', BoardCreateAPIView.as_view(), name='board-create'),
    path('my-boards/', MyBoardsAPIView.as_view(), name='my-boards'),
    path('add-users/<int:board_id>/', BoardAddUsersAPIView.as_view(), name='board-add-users'),
    path('accept-invitation/<int:board_id>/<str:token>/', AcceptInvitationAPIView.as_view(), name='accept-invitation'),
    path('<int:board_id>/members/', BoardMembersAPIView.as_view(), name='board-members'),
    path('<int:board_id>/lists/', BoardListsAPIView.as_view(), name='board-lists'),

    # Lists
    path('create-list/', ListCreateAPIView.as_view(), name='list-create'),
    path('lists/<int:list_id>/', ListDetailAPIView.as_view(), name='list-detail'),

    # Cards
    path('create-card/', CardCreateAPIView.as_view(), name='card-create'),
    path('cards/<int:card_id>/', CardDetailAPIView.as_view(), name='card-detail'),
    path('cards/<int:card_id>/add-members/', CardAddMembersAPIView.as_view(), name='card-add-members'),
    path('cards/<int:card_id>/remove-members/', CardRemoveMembersAPIView.as_view(), name='card-remove-members'),
    path('cards/<int:card_id>/attachments/', CardAttachmentsAPIView.as_view(), name='card-attachments'),
    path('cards/<int:card_id>/attachments/remove/', CardAttachmentsRemoveAPIView.as_view(), name='card-attachments-remove'),

    # Comments
    path('cards/<int:card_id>/comments/', CommentListCreateAPIView.as_view(), name='comment-list-create'),
    path('comments/<int:comment_id>/', CommentDetailAPIView.as_view(), name='comment-detail'),
]
