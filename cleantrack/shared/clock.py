"""Injected "today" so trend windows and upcoming lists are deterministic under test"""

from datetime import date


def get_today() -> date:
    """FastAPI dependency returning the current calendar date"""
    return date.today()
