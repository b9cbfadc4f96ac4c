import pytest

from core.errors import PermissionDeniedError
from core.policy import CEO, MANAGER, MEMBER, Policy, Relation, Rule, can_decide_leave, policy


class Actor:
    def __init__(self, role):
        self.role = role


@pytest.mark.parametrize("role,allowed", [(CEO, True), (MANAGER, True), (MEMBER, False)])
def test_privileged_actions(role, allowed):
    assert policy.allows("project.create", role) is allowed
    assert policy.allows("board.invite", role) is allowed
    assert policy.allows("finance.manage", role) is allowed


def test_relation_grants_access_to_member():
    assert not policy.allows("card.manage", MEMBER)
    assert policy.allows("card.manage", MEMBER, [Relation.BOARD_MEMBER])
    assert policy.allows("comment.modify", MEMBER, [Relation.AUTHOR])
    # a relation only counts for the rule that names it
    assert not policy.allows("comment.modify", MEMBER, [Relation.BOARD_MEMBER])
    assert policy.allows("sprint.manage", MEMBER, [Relation.PROJECT_MANAGER])


def test_attendance_refuses_ceo():
    assert policy.allows("attendance.clock", MANAGER)
    assert policy.allows("attendance.clock", MEMBER)
    assert not policy.allows("attendance.clock", CEO)


def test_require_raises_with_rule_message():
    with pytest.raises(PermissionDeniedError) as exc:
        policy.require("review.create", Actor(MEMBER))
    assert exc.value.message == "Only CEO or Manager can create reviews"
    assert exc.value.status_code == 403


def test_custom_rules():
    custom = Policy({"x.do": Rule(roles=frozenset({MEMBER}), message="nope")})
    assert custom.allows("x.do", MEMBER)
    with pytest.raises(PermissionDeniedError):
        custom.require("x.do", Actor(CEO))


@pytest.mark.parametrize("approver,requester,is_self,expected", [
    (MANAGER, MEMBER, False, True),
    (CEO, MEMBER, False, True),
    (CEO, MANAGER, False, True),
    (MANAGER, MANAGER, False, False),
    (MEMBER, MEMBER, False, False),
    (CEO, CEO, False, False),
    (CEO, CEO, True, False),
    (MANAGER, MEMBER, True, False),
])
def test_leave_seniority_chain(approver, requester, is_self, expected):
    assert can_decide_leave(approver, requester, is_self) is expected
