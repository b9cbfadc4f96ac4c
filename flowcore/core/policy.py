# -*- coding: utf-8 -*-
"""
Authorization policy.

Every service calls ``policy.require(action, actor, relations)`` at the top of an operation.
A rule allows an action when the actor's role is in ``roles`` OR the actor holds one of the
``relations`` to the resource (board member, comment author, project manager...).
Relations are computed by the caller, which already loaded the resource.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable

from core.errors import PermissionDeniedError

CEO = "ceo"
MANAGER = "manager"
MEMBER = "member"

PRIVILEGED_ROLES = frozenset({CEO, MANAGER})

# member < manager < ceo
SENIORITY = {MEMBER: 0, MANAGER: 1, CEO: 2}


class Relation(str, Enum):
    BOARD_MEMBER = "board_member"
    AUTHOR = "author"
    PROJECT_MANAGER = "project_manager"


@dataclass(frozen=True)
class Rule:
    roles: FrozenSet[str] = frozenset()
    relations: FrozenSet[Relation] = frozenset()
    message: str = "You are not allowed to perform this action"


def _privileged(message: str, *relations: Relation) -> Rule:
    return Rule(roles=PRIVILEGED_ROLES, relations=frozenset(relations), message=message)


RULES: Dict[str, Rule] = {
    # boards
    "board.create": _privileged("Only CEO or Manager can create boards"),
    "board.invite": _privileged("Only CEO or Manager can invite users to boards"),
    "board.view": _privileged("You are not allowed to view this board", Relation.BOARD_MEMBER),
    "list.manage": _privileged("Only board members, CEO or Manager can manage lists", Relation.BOARD_MEMBER),
    "card.manage": _privileged("Only board members, CEO, or Manager can manage cards", Relation.BOARD_MEMBER),
    "comment.create": _privileged("Only board members, CEO, or Manager can comment on cards", Relation.BOARD_MEMBER),
    "comment.modify": _privileged("Only the comment author, CEO, or Manager can modify this comment", Relation.AUTHOR),
    # projects
    "project.create": _privileged("Only CEO or Manager can create projects"),
    "project.view_all": _privileged("Only CEO or Manager can view all projects"),
    "project.update": _privileged("Only CEO or Manager can update projects"),
    "project.delete": _privileged("Only CEO or Manager can delete projects"),
    "project.members": _privileged("Only CEO or Manager can change project members"),
    "sprint.manage": _privileged("Only CEO, Manager, or the project manager can manage sprints", Relation.PROJECT_MANAGER),
    # reviews
    "review.create": _privileged("Only CEO or Manager can create reviews"),
    "review.list_all": _privileged("Only CEO or Manager can view all reviews"),
    # finance
    "finance.manage": _privileged("Only CEO or Manager can manage salaries and expenses"),
    # hr
    "attendance.clock": Rule(roles=frozenset({MANAGER, MEMBER}), message="You are not authorized to perform this action"),
}


class Policy:
    def __init__(self, rules: Dict[str, Rule] = None):
        self.rules = dict(RULES if rules is None else rules)

    def allows(self, action: str, role: str, relations: Iterable[Relation] = ()) -> bool:
        rule = self.rules[action]
        if role in rule.roles:
            return True
        return any(rel in rule.relations for rel in relations)

    def require(self, action: str, actor, relations: Iterable[Relation] = ()) -> None:
        if not self.allows(action, getattr(actor, "role", None), relations):
            raise PermissionDeniedError(self.rules[action].message)


def can_decide_leave(approver_role: str, requester_role: str, is_self: bool) -> bool:
    """Strict seniority: approver must outrank the requester, never their own request."""
    if is_self:
        return False
    return SENIORITY.get(approver_role, -1) > SENIORITY.get(requester_role, len(SENIORITY))


def is_privileged(actor) -> bool:
    return getattr(actor, "role", None) in PRIVILEGED_ROLES


policy = Policy()
