"""
核心業務邏輯層

這個 package 包含所有會動到 club 紀錄的邏輯，包括：
- Store：單一 ClubState 的讀取、寫入與原子更新
- Commands：每個指令的權限條件與效果
- Manager：instantiate / execute / query 入口
- Locks：並發控制工具
"""
