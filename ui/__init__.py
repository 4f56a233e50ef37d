"""
UI Module
Session state and terminal report rendering
"""
from .session import TrendSession
from .report import render_outcome, render_result, viral_bar_color

__all__ = [
    "TrendSession",
    "render_outcome",
    "render_result",
    "viral_bar_color",
]
