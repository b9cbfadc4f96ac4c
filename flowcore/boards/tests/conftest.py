import pytest

from boards.services.board import BoardService
from boards.services.card import CardService
from boards.services.comment import CommentService


@pytest.fixture
def board_service(config):
    return BoardService(config)


@pytest.fixture
def card_service(config):
    return CardService(config)


@pytest.fixture
def comment_service():
    return CommentService()


@pytest.fixture
def board(board_service, manager, member):
    """Board created by the manager, with `member` already joined"""
    b = board_service.create_board(name="Apollo", actor=manager)
    b.members.add(member)
    return b


@pytest.fixture
def board_list(board_service, board, manager):
    return board_service.create_list(board_id=board.id, name="Todo", actor=manager)
