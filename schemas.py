"""
Club API 的請求 / 回應格式

Execute 與 query 訊息以外層 key 標記種類，每個訊息只有一個 key：
    {"increment": {}}
    {"reset": {"count": 5}}
    {"add_member_to_club": {"prospect": "alice"}}
    {"get_count": {}}
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter

from models import Int32


class Message(BaseModel):
    model_config = ConfigDict(extra="forbid")


class Empty(Message):
    pass


# ============ Instantiate ============

class InstantiateMsg(Message):
    count: Int32
    x_factor: Int32
    members_list: Optional[List[str]] = None


# ============ Execute ============

class ResetArgs(Message):
    count: Int32


class ResetXFactorArgs(Message):
    x_factor: Int32


class AddMemberArgs(Message):
    prospect: str


class IncrementMsg(Message):
    increment: Empty


class IncrementXFactorMsg(Message):
    increment_x_factor: Empty


class IncrementMembersOnlyCountMsg(Message):
    increment_members_only_count: Empty


class ResetMembersOnlyCountMsg(Message):
    reset_members_only_count: Empty


class AddMeToWaitingListMsg(Message):
    add_me_to_waiting_list: Empty


class AddMemberToClubMsg(Message):
    add_member_to_club: AddMemberArgs


class AddWaitingListToClubMsg(Message):
    add_waiting_list_to_club: Empty


class ResetMsg(Message):
    reset: ResetArgs


class ResetXFactorMsg(Message):
    reset_x_factor: ResetXFactorArgs


ExecuteMsg = Union[
    IncrementMsg,
    IncrementXFactorMsg,
    IncrementMembersOnlyCountMsg,
    ResetMembersOnlyCountMsg,
    AddMeToWaitingListMsg,
    AddMemberToClubMsg,
    AddWaitingListToClubMsg,
    ResetMsg,
    ResetXFactorMsg,
]


# ============ Query ============

class GetCountMsg(Message):
    get_count: Empty


class GetXFactorMsg(Message):
    get_x_factor: Empty


class GetMembersOnlyCountMsg(Message):
    get_members_only_count: Empty


class GetMemberListMsg(Message):
    get_member_list: Empty


class GetWaitingListMsg(Message):
    get_waiting_list: Empty


QueryMsg = Union[
    GetCountMsg,
    GetXFactorMsg,
    GetMembersOnlyCountMsg,
    GetMemberListMsg,
    GetWaitingListMsg,
]

_execute_adapter = TypeAdapter(ExecuteMsg)
_query_adapter = TypeAdapter(QueryMsg)


def parse_execute_msg(data: dict) -> ExecuteMsg:
    """解析原始 execute 訊息，例如 {"reset": {"count": 5}}"""
    return _execute_adapter.validate_python(data)


def parse_query_msg(data: dict) -> QueryMsg:
    return _query_adapter.validate_python(data)


# ============ Responses ============

class Ack(BaseModel):
    status: str = "ok"


class CountResponse(BaseModel):
    count: int


class XFactorResponse(BaseModel):
    x_factor: int


class MembersOnlyCountResponse(BaseModel):
    members_only_count: int


class MemberListResponse(BaseModel):
    members_list: List[str]


class WaitingListResponse(BaseModel):
    waiting_list: List[str]


QueryResponse = Union[
    CountResponse,
    XFactorResponse,
    MembersOnlyCountResponse,
    MemberListResponse,
    WaitingListResponse,
]
