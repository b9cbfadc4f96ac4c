# -*- coding: utf-8 -*-
"""
Repository layer for boards (DB only):
- invitations: create / find valid / consume
- card number allocation (plain read-increment-save, or locked F() update)
No business rules here; services decide who may do what.
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional
import uuid

from django.db import transaction, connection
from django.db.models import F
from django.utils import timezone

from boards.models import Board, BoardInvitation


# ============================
# Invitations
# ============================
def new_token() -> str:
    return uuid.uuid4().hex

@transaction.atomic
def create_invitation(*, board: Board, user, expires_at: datetime) -> BoardInvitation:
    inv = BoardInvitation.objects.create(board=board, user=user, token=new_token(), expires_at=expires_at)
    board.invited_users.add(user)
    return inv

def find_valid_invitation(*, board: Board, token: str, now: Optional[datetime] = None) -> Optional[BoardInvitation]:
    now = now or timezone.now()
    return (
        BoardInvitation.objects
        .select_related("user")
        .filter(board=board, token=token, expires_at__gt=now)
        .first()
    )

@transaction.atomic
def consume_invitation(inv: BoardInvitation) -> Board:
    board = inv.board
    board.members.add(inv.user)
    board.invited_users.remove(inv.user)
    BoardInvitation.objects.filter(board=board, user=inv.user).delete()
    return board


# ============================
# Card numbers
# ============================
def _supports_for_update() -> bool:
    return getattr(connection.features, "has_select_for_update", False)

def allocate_card_number(board: Board, *, atomic: bool = False) -> int:
    """
    Increment board.last_card_number, persist it, return the new value.
    atomic=False: load-increment-save on the instance (concurrent callers can race).
    atomic=True: row lock + F() update inside the caller's transaction.
    """
    if not atomic:
        board.last_card_number += 1
        board.save(update_fields=["last_card_number", "updated_at"])
        return board.last_card_number

    qs = Board.objects.filter(id=board.id)
    if _supports_for_update():
        qs = qs.select_for_update()
    with transaction.atomic():
        list(qs)  # take the lock
        Board.objects.filter(id=board.id).update(last_card_number=F("last_card_number") + 1)
        board.last_card_number = Board.objects.values_list("last_card_number", flat=True).get(id=board.id)
    return board.last_card_number
