"""
Agents Module
"""
from .trend_agent import TrendAnalystAgent

__all__ = [
    "TrendAnalystAgent",
]
