"""
自定義異常類別

集中管理所有 club 業務邏輯異常，方便 API 層統一處理
"""


class ClubException(Exception):
    """所有 club 異常的基類"""
    pass


# ============ 輸入相關異常 ============

class ValidationError(ClubException):
    """身分格式錯誤，或計數器更新會溢位"""
    pass


# ============ 權限相關異常 ============

class AuthorizationError(ClubException):
    """呼叫者不符合指令的權限條件"""
    pass


# ============ Storage 相關異常 ============

class StorageError(ClubException):
    """club 紀錄不存在或無法讀取"""
    pass


class Uninitialized(StorageError):
    """club 尚未初始化"""
    def __init__(self, key):
        self.key = key
        super().__init__(f"Club state not found under key '{key}', instantiate first")


class Corrupted(StorageError):
    """儲存的資料無法解碼成 ClubState"""
    def __init__(self, key, reason):
        self.key = key
        super().__init__(f"Club state under key '{key}' is corrupted: {reason}")


# ============ 生命週期相關異常 ============

class AlreadyInitialized(ClubException):
    """club 只能初始化一次"""
    def __init__(self, key):
        self.key = key
        super().__init__(f"Club state already exists under key '{key}'")
