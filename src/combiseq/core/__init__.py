"""Core data structures and settings for combiseq."""

from combiseq.core.config import Settings, settings
from combiseq.core.types import SplitContext

__all__ = [
    "Settings",
    "settings",
    "SplitContext",
]
