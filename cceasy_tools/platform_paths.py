"""
Platform-specific layout of the local installation root.

npm lays out a ``--prefix`` directory differently per platform: on POSIX
systems executables land in ``<prefix>/bin``, on Windows the ``.cmd`` shims
are written to the prefix root itself. Everything that needs to know about
that difference goes through a PlatformPaths instance.
"""

from __future__ import annotations

import ntpath
import os
import posixpath

from .common import is_windows


LOCAL_ROOT_ENV = "CCEASY_LOCAL_ROOT"

# Extensions Windows can execute without going through cmd.exe
WINDOWS_EXECUTABLE_EXTENSIONS: tuple[str, ...] = (".cmd", ".exe", ".bat", ".com")


def default_local_root(home: str | None = None) -> str:
    """Return ``<home>/.cceasy/node``."""
    home = home if home is not None else os.path.expanduser("~")
    return os.path.join(home, ".cceasy", "node")


class PlatformPaths:
    """
    Base class for platform path policies.

    Attributes:
        local_root: Absolute installation root passed to npm as ``--prefix``
        path_separator: Separator used in the PATH environment variable
    """

    path_separator = os.pathsep
    _isabs = staticmethod(os.path.isabs)

    def __init__(self, local_root: str):
        # npm resolves a relative --prefix against its own cwd
        if not self._isabs(local_root):
            local_root = os.path.abspath(local_root)
        self.local_root = local_root

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.local_root!r})"

    @property
    def local_bin_dir(self) -> str:
        """Directory holding executables installed under the local root."""
        raise NotImplementedError

    def binary_candidates(self, name: str) -> tuple[str, ...]:
        """Local paths to check, in order, for a tool binary."""
        raise NotImplementedError

    def package_manager_candidates(self) -> tuple[str, ...]:
        """Local paths to check, in order, for the npm executable."""
        raise NotImplementedError

    def wraps_command(self, executable: str) -> bool:
        """Whether ``executable`` must be launched through a command interpreter."""
        return False


class PosixPaths(PlatformPaths):
    path_separator = ":"
    _join = staticmethod(posixpath.join)
    _isabs = staticmethod(posixpath.isabs)

    @property
    def local_bin_dir(self) -> str:
        return self._join(self.local_root, "bin")

    def binary_candidates(self, name: str) -> tuple[str, ...]:
        return (self._join(self.local_bin_dir, name),)

    def package_manager_candidates(self) -> tuple[str, ...]:
        return (self._join(self.local_bin_dir, "npm"),)


class WindowsPaths(PlatformPaths):
    path_separator = ";"
    _join = staticmethod(ntpath.join)
    _isabs = staticmethod(ntpath.isabs)

    @property
    def local_bin_dir(self) -> str:
        return self.local_root

    def binary_candidates(self, name: str) -> tuple[str, ...]:
        # npm normally writes shims to the prefix root, older layouts used bin/
        return (
            self._join(self.local_root, f"{name}.cmd"),
            self._join(self.local_root, "bin", f"{name}.cmd"),
        )

    def package_manager_candidates(self) -> tuple[str, ...]:
        return (self._join(self.local_root, "npm.cmd"),)

    def wraps_command(self, executable: str) -> bool:
        return not executable.lower().endswith(WINDOWS_EXECUTABLE_EXTENSIONS)


def get_platform_paths(local_root: str | None = None, platform: str | None = None) -> PlatformPaths:
    """
    Build the path policy for a platform.

    Args:
        local_root: Installation root (default: $CCEASY_LOCAL_ROOT or ~/.cceasy/node)
        platform: "windows", "posix", a sys.platform value, or None/"auto" for current

    Returns:
        PosixPaths or WindowsPaths instance
    """
    if not local_root:
        local_root = os.environ.get(LOCAL_ROOT_ENV) or default_local_root()

    if platform in (None, "auto"):
        windows = is_windows()
    else:
        windows = is_windows(platform)

    return WindowsPaths(local_root) if windows else PosixPaths(local_root)
