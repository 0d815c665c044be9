"""
服務層

這個 package 包含純計算邏輯，不負責狀態轉換：
- AddressService：身分格式驗證
- AuthorizationService：每個指令的權限條件
"""
