"""
地址服務：驗證呼叫者與會員的身分

純計算邏輯，不涉及狀態存取
"""
import re

from core.exceptions import ValidationError

MIN_ADDRESS_LENGTH = 3
MAX_ADDRESS_LENGTH = 90

_ADDRESS_CHARS = re.compile(r"[a-z0-9]+")


def validate_address(address: str) -> str:
    """
    檢查身分是否為格式正確的地址

    規則：
    - 長度 3 到 90 個字元
    - 已經正規化為小寫
    - 只包含 ASCII 英文字母與數字

    參數：
        address: 原始身分字串

    返回：
        原字串，不做任何轉換（比對一律是完全相同的字串）

    異常：
        ValidationError: 任一規則不符合

    範例：
        validate_address("alex") -> "alex"
        validate_address("Alex") -> ValidationError（未正規化）
        validate_address("ab") -> ValidationError（太短）
    """
    if not isinstance(address, str):
        raise ValidationError(f"Invalid input: address must be a string, got {type(address).__name__}")

    if len(address) < MIN_ADDRESS_LENGTH:
        raise ValidationError(
            f"Invalid input: address too short (must be >= {MIN_ADDRESS_LENGTH}): '{address}'"
        )

    if len(address) > MAX_ADDRESS_LENGTH:
        raise ValidationError(
            f"Invalid input: address too long (must be <= {MAX_ADDRESS_LENGTH})"
        )

    if address != address.lower():
        raise ValidationError(f"Invalid input: address not normalized: '{address}'")

    if not _ADDRESS_CHARS.fullmatch(address):
        raise ValidationError(f"Invalid input: address contains invalid characters: '{address}'")

    return address


def validate_addresses(addresses: list[str]) -> list[str]:
    """逐一驗證，遇到第一個錯誤就失敗；保留原本順序"""
    return [validate_address(address) for address in addresses]
