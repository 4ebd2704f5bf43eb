"""
Package manager lookup.

Tools are installed with npm. A copy of npm living inside the local
installation root (a bundled Node.js) wins over whatever is on PATH.
"""

from __future__ import annotations

from .common import vlog
from .platform_paths import PlatformPaths
from .system import FileSystem

PACKAGE_MANAGER_NAME = "npm"


def find_package_manager(paths: PlatformPaths, fs: FileSystem, verbose: bool = False) -> str:
    """
    Locate the npm executable.

    Search order:
    1. Fixed candidate inside the local installation root
    2. npm on the process search path

    Args:
        paths: Platform path policy
        fs: Filesystem adapter
        verbose: Enable verbose logging

    Returns:
        Path to npm, or empty string if it cannot be found
    """
    for candidate in paths.package_manager_candidates():
        if fs.exists(candidate):
            vlog(f"Using local {PACKAGE_MANAGER_NAME}: {candidate}", verbose)
            return candidate

    system_npm = fs.which(PACKAGE_MANAGER_NAME)
    if system_npm:
        vlog(f"Using system {PACKAGE_MANAGER_NAME}: {system_npm}", verbose)
        return system_npm

    vlog(f"{PACKAGE_MANAGER_NAME} not found locally or on PATH", verbose)
    return ""
