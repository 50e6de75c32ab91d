from __future__ import annotations

from .config import CopyRequest, load_config
from .main import run_copy
from .report import UserMessage

__all__ = [
    "CopyRequest",
    "UserMessage",
    "load_config",
    "run_copy",
]
