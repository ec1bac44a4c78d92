"""Small shared helpers used across plugconf."""
from __future__ import annotations

from .merge import deep_merge
from .process import get_pid
from .text import is_default, is_empty, is_not_empty

__all__ = ["deep_merge", "get_pid", "is_default", "is_empty", "is_not_empty"]
