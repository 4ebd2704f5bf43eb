"""
ToolManager: the entry point the host application talks to.
"""

from __future__ import annotations

from .config import Config
from .detection import ToolStatus, resolve_tool
from .installer import LogSink, install_tool as _install_tool
from .logging_config import default_log_sink
from .platform_paths import PlatformPaths, get_platform_paths
from .system import FileSystem, LocalFileSystem, ProcessRunner, SubprocessRunner
from .tools import KNOWN_TOOLS


class ToolManager:
    """
    Status checks and installs for the supported assistant CLIs.

    Every collaborator is injectable; anything left out falls back to the real
    filesystem, real subprocesses and the package logger.
    """

    def __init__(
        self,
        log: LogSink | None = None,
        paths: PlatformPaths | None = None,
        fs: FileSystem | None = None,
        runner: ProcessRunner | None = None,
        config: Config | None = None,
        verbose: bool = False,
    ):
        config = config or Config()
        self.log = log or default_log_sink
        self.paths = paths or get_platform_paths(config.local_root or None, config.platform)
        self.fs = fs or LocalFileSystem()
        self.runner = runner or SubprocessRunner()
        self.verbose = verbose

    def get_tool_status(self, name: str) -> ToolStatus:
        return resolve_tool(name, self.paths, self.fs, self.runner, self.verbose)

    def check_all_tools_status(self) -> list[ToolStatus]:
        """Status of every supported tool, in claude, gemini, codex order."""
        return [self.get_tool_status(tool.value) for tool in KNOWN_TOOLS]

    def install_tool(self, name: str) -> None:
        """Install ``name`` into the local root; raises InstallError on failure."""
        _install_tool(name, self.paths, self.fs, self.runner, self.log, verbose=self.verbose)


def check_tools_status() -> list[ToolStatus]:
    """Status of every supported tool using a default ToolManager."""
    return ToolManager().check_all_tools_status()


def install_tool(name: str, log: LogSink | None = None) -> None:
    """Install a tool using a default ToolManager."""
    ToolManager(log=log).install_tool(name)
