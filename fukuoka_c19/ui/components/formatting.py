"""
Utility helpers for formatting counts for display.
"""

from __future__ import annotations

from typing import Optional


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"
