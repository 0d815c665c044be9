import pytest

from models import ClubState
from services import authorization_service as auth


@pytest.fixture
def state():
    return ClubState(
        count=0,
        x_factor=0,
        members_only_count=0,
        owner="creator",
        members_list=["alice", "bob"],
        waiting_list=["carol"],
    )


def test_anyone_always_allowed(state):
    assert auth.anyone("whoever", state)


@pytest.mark.parametrize("caller, expected", [("alex", True), ("xavier", True), ("bob", False)])
def test_has_x(state, caller, expected):
    assert auth.has_x(caller, state) is expected


def test_has_x_is_case_sensitive(state):
    assert not auth.has_x("ALEX", state)


def test_is_member(state):
    assert auth.is_member("alice", state)
    assert not auth.is_member("carol", state)
    assert not auth.is_member("creator", state)


@pytest.mark.parametrize("caller, expected", [("dave", True), ("alice", False), ("carol", False)])
def test_can_join_waiting_list(state, caller, expected):
    assert auth.can_join_waiting_list(caller, state) is expected


def test_owner_outside_club_may_reset(state):
    assert auth.is_owner_outside_club("creator", state)
    assert not auth.is_owner_outside_club("alice", state)


def test_owner_who_is_member_may_not_reset(state):
    state.members_list.append("creator")
    assert not auth.is_owner_outside_club("creator", state)


@pytest.mark.parametrize(
    "caller, expected",
    [
        ("alex", True),   # lexical route
        ("bob", True),    # membership route
        ("carol", False),
    ],
)
def test_has_x_or_is_member(state, caller, expected):
    assert auth.has_x_or_is_member(caller, state) is expected
