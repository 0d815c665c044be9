"""
Club API Endpoints

職責：
1. 初始化 club
2. 執行指令
3. 回應查詢

呼叫者身分來自 X-Sender header；所有業務邏輯集中在 ClubManager
"""
from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.orm import Session
import logging

from database import get_db
from schemas import (
    InstantiateMsg,
    ExecuteMsg,
    QueryMsg,
    QueryResponse,
    Ack,
    Empty,
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
from core.club_manager import ClubManager
from core.exceptions import (
    ClubException,
    ValidationError,
    AuthorizationError,
    Uninitialized,
    Corrupted,
    AlreadyInitialized,
)
from services.address_service import validate_address

router = APIRouter(prefix="/api/club", tags=["club"])
logger = logging.getLogger(__name__)

STATUS_CODES = {
    ValidationError: 400,
    AuthorizationError: 403,
    Uninitialized: 404,
    AlreadyInitialized: 409,
    Corrupted: 500,
}


def to_http_error(error: ClubException) -> HTTPException:
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(error, exc_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))


def get_sender(x_sender: str = Header(...)) -> str:
    """FastAPI dependency：驗證過的呼叫者身分"""
    try:
        return validate_address(x_sender)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/instantiate", response_model=Ack)
def instantiate(
    msg: InstantiateMsg,
    sender: str = Depends(get_sender),
    db: Session = Depends(get_db)
):
    """
    初始化 club（只能一次）

    返回：
        - status: "ok"
    """
    try:
        ClubManager.instantiate(db, sender, msg)
        return Ack()

    except ClubException as e:
        raise to_http_error(e)
    except Exception as e:
        logger.error(f"Failed to instantiate club: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/execute", response_model=Ack)
def execute(
    msg: ExecuteMsg,
    sender: str = Depends(get_sender),
    db: Session = Depends(get_db)
):
    """
    執行一個指令，例如 {"increment": {}} 或 {"reset": {"count": 5}}

    返回：
        - status: "ok"（效果透過查詢觀察）
    """
    try:
        ClubManager.execute(db, sender, msg)
        return Ack()

    except ClubException as e:
        raise to_http_error(e)
    except Exception as e:
        logger.error(f"Failed to execute command: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/query", response_model=QueryResponse)
def query(msg: QueryMsg, db: Session = Depends(get_db)):
    """
    讀取一個欄位，例如 {"get_count": {}} -> {"count": 17}
    """
    return _run_query(db, msg)


@router.get("/count", response_model=CountResponse)
def get_count(db: Session = Depends(get_db)):
    return _run_query(db, GetCountMsg(get_count=Empty()))


@router.get("/x-factor", response_model=XFactorResponse)
def get_x_factor(db: Session = Depends(get_db)):
    return _run_query(db, GetXFactorMsg(get_x_factor=Empty()))


@router.get("/members-only-count", response_model=MembersOnlyCountResponse)
def get_members_only_count(db: Session = Depends(get_db)):
    return _run_query(db, GetMembersOnlyCountMsg(get_members_only_count=Empty()))


@router.get("/members", response_model=MemberListResponse)
def get_member_list(db: Session = Depends(get_db)):
    return _run_query(db, GetMemberListMsg(get_member_list=Empty()))


@router.get("/waiting-list", response_model=WaitingListResponse)
def get_waiting_list(db: Session = Depends(get_db)):
    return _run_query(db, GetWaitingListMsg(get_waiting_list=Empty()))


def _run_query(db: Session, msg: QueryMsg):
    try:
        return ClubManager.query(db, msg)

    except ClubException as e:
        raise to_http_error(e)
    except Exception as e:
        logger.error(f"Failed to query club: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
