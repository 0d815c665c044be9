"""
資料模型

- StoreEntry：State Store 背後 key/value 表的一列
- ClubState：存在 STATE_KEY 下的唯一紀錄
"""
from typing import Annotated, List

from pydantic import BaseModel, Field
from sqlalchemy import Column, String, LargeBinary

from database import Base

# 唯一 ClubState 紀錄的固定 key
STATE_KEY = "config"

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class StoreEntry(Base):
    __tablename__ = "kv_store"

    key = Column(String(64), primary_key=True)
    value = Column(LargeBinary, nullable=False)


class ClubState(BaseModel):
    """
    Club 紀錄

    欄位：
        count: 任何人都可以累加的計數器
        x_factor: 只有身分含 'x' 的呼叫者可以累加
        members_only_count: 只有會員可以累加，初始為 0
        owner: 初始化 club 的身分，之後不會再改
        members_list: 有順序的會員名單
        waiting_list: 有順序的候補名單
    """
    count: Int32
    x_factor: Int32
    members_only_count: Int32
    owner: str
    members_list: List[str]
    waiting_list: List[str]

    def is_member(self, identity: str) -> bool:
        return identity in self.members_list

    def is_waiting(self, identity: str) -> bool:
        return identity in self.waiting_list
