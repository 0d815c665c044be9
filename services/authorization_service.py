"""
權限服務：每個指令固定的權限條件

每個條件都是純函式 (caller, state) -> bool，
看到的是指令執行前的狀態
"""
from models import ClubState


def anyone(caller: str, state: ClubState) -> bool:
    return True


def has_x(caller: str, state: ClubState) -> bool:
    """字面條件：身分包含字元 'x'"""
    return "x" in caller


def is_member(caller: str, state: ClubState) -> bool:
    return state.is_member(caller)


def can_join_waiting_list(caller: str, state: ClubState) -> bool:
    """不是會員，也還沒在候補名單上"""
    return not state.is_member(caller) and not state.is_waiting(caller)


def is_owner_outside_club(caller: str, state: ClubState) -> bool:
    """
    Reset 的條件：必須是 owner，而且 owner 不在會員名單上

    照原樣保留；同時是會員的 owner 會被拒絕
    """
    return caller == state.owner and not state.is_member(caller)


def has_x_or_is_member(caller: str, state: ClubState) -> bool:
    """兩條獨立的路徑：字面條件，或會員身分"""
    return has_x(caller, state) or is_member(caller, state)
