"""
指令表：每個 execute 訊息對應一組權限條件與效果

效果函式拿到狀態的私有副本、訊息參數與呼叫者，返回下一個狀態；
效果函式不判斷權限，執行時權限條件已經通過
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from models import ClubState, INT32_MAX
from schemas import (
    IncrementMsg,
    IncrementXFactorMsg,
    IncrementMembersOnlyCountMsg,
    ResetMembersOnlyCountMsg,
    AddMeToWaitingListMsg,
    AddMemberToClubMsg,
    AddWaitingListToClubMsg,
    ResetMsg,
    ResetXFactorMsg,
)
from core.exceptions import ValidationError
from services import authorization_service as auth
from services.address_service import validate_address

Predicate = Callable[[str, ClubState], bool]
Effect = Callable[[ClubState, Any, str], ClubState]


@dataclass(frozen=True)
class Command:
    name: str
    allowed: Predicate
    apply: Effect
    success: str
    # None 代表任何人都可以執行，不會被拒絕
    denial: Optional[str] = None


def _bump(value: int, field: str) -> int:
    if value >= INT32_MAX:
        raise ValidationError(f"Cannot increment {field}: overflow")
    return value + 1


def increment(state: ClubState, args, caller: str) -> ClubState:
    state.count = _bump(state.count, "count")
    return state


def increment_x_factor(state: ClubState, args, caller: str) -> ClubState:
    state.x_factor = _bump(state.x_factor, "x_factor")
    return state


def increment_members_only_count(state: ClubState, args, caller: str) -> ClubState:
    state.members_only_count = _bump(state.members_only_count, "members_only_count")
    return state


def reset_members_only_count(state: ClubState, args, caller: str) -> ClubState:
    state.members_only_count = 0
    return state


def add_me_to_waiting_list(state: ClubState, args, caller: str) -> ClubState:
    state.waiting_list.append(caller)
    return state


def add_member_to_club(state: ClubState, args, caller: str) -> ClubState:
    # 不檢查重複
    state.members_list.append(validate_address(args.prospect))
    return state


def add_waiting_list_to_club(state: ClubState, args, caller: str) -> ClubState:
    state.members_list.extend(state.waiting_list)
    state.waiting_list = []
    return state


def reset(state: ClubState, args, caller: str) -> ClubState:
    state.count = args.count
    return state


def reset_x_factor(state: ClubState, args, caller: str) -> ClubState:
    state.x_factor = args.x_factor
    return state


COMMANDS: Dict[Type, Command] = {
    IncrementMsg: Command(
        name="increment",
        allowed=auth.anyone,
        apply=increment,
        success="count incremented successfully",
    ),
    IncrementXFactorMsg: Command(
        name="increment_x_factor",
        allowed=auth.has_x,
        apply=increment_x_factor,
        denial="You need an x in your address to increment count",
        success="x factor incremented successfully",
    ),
    IncrementMembersOnlyCountMsg: Command(
        name="increment_members_only_count",
        allowed=auth.is_member,
        apply=increment_members_only_count,
        denial="You need to be on the members list to increment count",
        success="Members only count incremented successfully",
    ),
    ResetMembersOnlyCountMsg: Command(
        name="reset_members_only_count",
        allowed=auth.is_member,
        apply=reset_members_only_count,
        denial="You need to be on the members list to reset this count",
        success="Members only count reset successfully",
    ),
    AddMeToWaitingListMsg: Command(
        name="add_me_to_waiting_list",
        allowed=auth.can_join_waiting_list,
        apply=add_me_to_waiting_list,
        denial="You are already part of the waiting list or members list!",
        success="Caller added to the waiting list",
    ),
    AddMemberToClubMsg: Command(
        name="add_member_to_club",
        allowed=auth.is_member,
        apply=add_member_to_club,
        denial="Only club members can add a new member!",
        success="Member added to club",
    ),
    AddWaitingListToClubMsg: Command(
        name="add_waiting_list_to_club",
        allowed=auth.is_member,
        apply=add_waiting_list_to_club,
        denial="Only club members can do this action!",
        success="Waiting list added to club",
    ),
    ResetMsg: Command(
        name="reset",
        allowed=auth.is_owner_outside_club,
        apply=reset,
        denial="Only the owner can reset count",
        success="count reset successfully",
    ),
    ResetXFactorMsg: Command(
        name="reset_x_factor",
        allowed=auth.has_x_or_is_member,
        apply=reset_x_factor,
        denial="You need an x in your address to reset count",
        success="X factor reset successfully",
    ),
}
