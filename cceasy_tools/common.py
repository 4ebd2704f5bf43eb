"""
Common utilities shared across cceasy_tools modules.
"""

from __future__ import annotations

import os
import sys


def is_windows(platform: str | None = None) -> bool:
    """
    Check if the given (or current) platform belongs to the Windows family.

    Args:
        platform: Platform string as reported by sys.platform (default: current)

    Returns:
        True for win32 style platforms (or "windows"), False otherwise.
    """
    platform = platform if platform is not None else sys.platform
    return platform.startswith("win")


def vlog(msg: str, verbose: bool = False) -> None:
    """
    Log verbose message using structured logging.

    Messages are emitted only when verbose mode is enabled or
    CCEASY_DEBUG=1 is set in the environment.

    Args:
        msg: Message to log
        verbose: Whether verbose mode is enabled
    """
    if verbose or os.environ.get("CCEASY_DEBUG", "0") == "1":
        from .logging_config import get_logger
        get_logger().info(msg)
