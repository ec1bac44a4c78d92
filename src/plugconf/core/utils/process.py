from __future__ import annotations

import os

_PID: int = -1


def get_pid() -> int:
    """Return the current process id (cached after the first call)."""
    global _PID
    if _PID < 0:
        _PID = os.getpid()
    return _PID


__all__ = ["get_pid"]
