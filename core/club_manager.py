"""
Club Manager：管理 club 紀錄的完整生命週期

職責：
1. 初始化 club（只能一次）
2. 執行指令（先檢查權限條件，再套用效果，整體原子性）
3. 回應查詢（純讀取）

所有修改都在 @transactional 內透過 StateStore.update 進行：
整個指令一起 commit，否則 store 維持原樣
"""
from sqlalchemy.orm import Session
import logging

from models import ClubState
from schemas import (
    InstantiateMsg,
    ExecuteMsg,
    QueryMsg,
    QueryResponse,
    GetCountMsg,
    GetXFactorMsg,
    GetMembersOnlyCountMsg,
    GetMemberListMsg,
    GetWaitingListMsg,
    CountResponse,
    XFactorResponse,
    MembersOnlyCountResponse,
    MemberListResponse,
    WaitingListResponse,
)
from core.commands import COMMANDS
from core.store import StateStore
from core.exceptions import AuthorizationError, AlreadyInitialized
from services.address_service import validate_addresses
from database import transactional

logger = logging.getLogger(__name__)


QUERIES = {
    GetCountMsg: lambda state: CountResponse(count=state.count),
    GetXFactorMsg: lambda state: XFactorResponse(x_factor=state.x_factor),
    GetMembersOnlyCountMsg: lambda state: MembersOnlyCountResponse(
        members_only_count=state.members_only_count
    ),
    GetMemberListMsg: lambda state: MemberListResponse(members_list=list(state.members_list)),
    GetWaitingListMsg: lambda state: WaitingListResponse(waiting_list=list(state.waiting_list)),
}


class ClubManager:
    """Club 生命週期管理器"""

    @staticmethod
    @transactional
    def instantiate(db: Session, sender: str, msg: InstantiateMsg) -> ClubState:
        """
        建立 club 紀錄

        流程：
        1. 已經有紀錄就拒絕
        2. 驗證提供的會員名單（沒提供則預設為 sender）
        3. 寫入新紀錄

        參數：
            db: SQLAlchemy Session
            sender: 初始化的呼叫者，成為 owner
            msg: 初始計數器與選填的會員名單

        返回：
            寫入的 ClubState

        異常：
            AlreadyInitialized: 已經初始化過
            ValidationError: 會員身分格式錯誤

        注意：
            - 兩個 instantiate 同時執行時，後寫入的一方由 StateStore.create
              回報 AlreadyInitialized
        """
        store = StateStore(db)
        if store.may_load() is not None:
            raise AlreadyInitialized(store.key)

        if msg.members_list is not None:
            members = validate_addresses(msg.members_list)
        else:
            members = [sender]

        state = ClubState(
            count=msg.count,
            x_factor=msg.x_factor,
            members_only_count=0,
            owner=sender,
            members_list=members,
            waiting_list=[],
        )
        store.create(state)

        logger.info(f"Club was initialized by {sender} with {len(members)} member(s)")
        return state

    @staticmethod
    @transactional
    def execute(db: Session, sender: str, msg: ExecuteMsg) -> ClubState:
        """
        對 club 紀錄執行一個指令

        權限條件看到的是指令執行前的狀態；被拒絕時不會寫入任何東西

        參數：
            db: SQLAlchemy Session
            sender: 呼叫者
            msg: 任一 execute 訊息

        返回：
            更新後的 ClubState（API 層只回傳 ack）

        異常：
            AuthorizationError: 權限條件不成立
            ValidationError: prospect 格式錯誤，或計數器溢位
            Uninitialized / Corrupted: 無法讀取紀錄
        """
        command = COMMANDS[type(msg)]
        args = getattr(msg, command.name)

        def transition(state: ClubState) -> ClubState:
            if not command.allowed(sender, state):
                logger.warning(f"Denied {command.name} for {sender}")
                raise AuthorizationError(command.denial)
            return command.apply(state, args, sender)

        state = StateStore(db).update(transition)

        logger.info(f"{command.success} (sender={sender})")
        return state

    @staticmethod
    def query(db: Session, msg: QueryMsg) -> QueryResponse:
        """
        讀取 club 紀錄的一個欄位

        異常：
            Uninitialized / Corrupted: 無法讀取紀錄
        """
        state = StateStore(db).load()
        return QUERIES[type(msg)](state)
