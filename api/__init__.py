"""
API 層：HTTP endpoints
"""
