"""
並發控制工具

提供 key/value store 的行級鎖，確保一個指令的「讀取-檢查-寫入」不會被其他寫入者插隊

- PostgreSQL 等資料庫：使用 SELECT ... FOR UPDATE（悲觀鎖）
- SQLite：會忽略 FOR UPDATE，改由 database.create_db_engine 設定的
  BEGIN IMMEDIATE 在交易開始時就取得整個資料庫的寫入鎖
"""
from sqlalchemy.orm import Session, Query

from models import StoreEntry


def with_entry_lock(key: str, db: Session) -> Query:
    """
    鎖定一筆 store entry（行級鎖）

    使用場景：
    - 讀取 club state 後，同一個 transaction 內還要寫回

    範例：
        entry = with_entry_lock(STATE_KEY, db).first()
        if not entry:
            raise Uninitialized(STATE_KEY)
        entry.value = new_value
        db.commit()

    參數：
        key: store key
        db: SQLAlchemy Session

    返回：
        Query object（需要呼叫 .first() 來取得結果）

    注意：
        - nowait=False 表示如果鎖被佔用，會等待
        - 必須在 transaction 內使用（確保有 commit 或 rollback）
    """
    return db.query(StoreEntry).filter(
        StoreEntry.key == key
    ).with_for_update(nowait=False)
