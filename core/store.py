"""
State Store：擁有唯一的 ClubState 紀錄

職責：
1. 在固定 key 下讀取 / 寫入紀錄
2. 原子性的 read-modify-write（update），是指令唯一的修改路徑

commit / rollback 由呼叫端的 @transactional 負責
"""
from typing import Callable, Optional
import logging

from pydantic import ValidationError as ShapeError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models import ClubState, StoreEntry, STATE_KEY
from core.locks import with_entry_lock
from core.exceptions import Uninitialized, Corrupted, AlreadyInitialized

logger = logging.getLogger(__name__)


class StateStore:
    """club 紀錄的 key/value 存取"""

    def __init__(self, db: Session, key: str = STATE_KEY):
        self.db = db
        self.key = key

    def may_load(self) -> Optional[ClubState]:
        """
        讀取紀錄，從未寫入過則返回 None

        異常：
            Corrupted: 儲存的資料不是 ClubState
        """
        entry = self.db.query(StoreEntry).filter(StoreEntry.key == self.key).first()
        if entry is None:
            return None
        return self._decode(entry)

    def load(self) -> ClubState:
        """
        讀取紀錄

        異常：
            Uninitialized: key 下沒有資料
            Corrupted: 儲存的資料不是 ClubState
        """
        state = self.may_load()
        if state is None:
            raise Uninitialized(self.key)
        return state

    def create(self, state: ClubState) -> None:
        """
        寫入第一筆紀錄（只新增，不覆蓋）

        異常：
            AlreadyInitialized: key 下已經有資料（包含同時初始化撞到 primary key）
        """
        self.db.add(StoreEntry(key=self.key, value=state.model_dump_json().encode("utf-8")))
        try:
            self.db.flush()
        except IntegrityError as e:
            raise AlreadyInitialized(self.key) from e

    def save(self, state: ClubState) -> None:
        value = state.model_dump_json().encode("utf-8")
        entry = self.db.query(StoreEntry).filter(StoreEntry.key == self.key).first()
        if entry is None:
            self.db.add(StoreEntry(key=self.key, value=value))
        else:
            entry.value = value
        self.db.flush()

    def update(self, fn: Callable[[ClubState], ClubState]) -> ClubState:
        """
        原子性的 read-modify-write

        流程：
        1. 鎖定並讀取紀錄
        2. 對紀錄的 deep copy 套用 fn
        3. 寫回結果

        fn 拋出異常時不會寫入任何東西，異常直接往上拋；
        fn 看到的永遠是修改前的狀態

        參數：
            fn: ClubState -> ClubState，拋出異常代表中止

        返回：
            寫入後的 ClubState

        異常：
            Uninitialized / Corrupted: 讀取失敗
            fn 拋出的任何異常
        """
        entry = with_entry_lock(self.key, self.db).first()
        if entry is None:
            raise Uninitialized(self.key)

        current = self._decode(entry)
        updated = fn(current.model_copy(deep=True))

        entry.value = updated.model_dump_json().encode("utf-8")
        self.db.flush()
        return updated

    def _decode(self, entry: StoreEntry) -> ClubState:
        try:
            return ClubState.model_validate_json(entry.value)
        except ShapeError as e:
            logger.error(f"Failed to decode club state under key {self.key}: {e}")
            raise Corrupted(self.key, f"{e.error_count()} invalid field(s)") from e
