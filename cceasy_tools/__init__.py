"""
cceasy-tools - detection and installation of AI assistant CLIs.

Modules:
- Detection: PATH / local-root lookup and version probing (claude, gemini, codex)
- Installation: npm installs into an isolated prefix under ~/.cceasy/node
- Foundation: platform path layouts, filesystem/process adapters, config, logging
"""

__version__ = "1.0.0"

VERSION = __version__

from .tools import Tool, KNOWN_TOOLS, PACKAGES, get_tool
from .platform_paths import PlatformPaths, PosixPaths, WindowsPaths, get_platform_paths, default_local_root
from .system import CommandResult, FileSystem, ProcessRunner, LocalFileSystem, SubprocessRunner
from .detection import ToolStatus, parse_version, find_binary, probe_version, resolve_tool
from .package_managers import find_package_manager
from .installer import (
    InstallError,
    PackageManagerNotFound,
    UnknownTool,
    DirectoryCreateFailed,
    InstallationFailed,
    build_install_command,
    build_child_environment,
)
from .manager import ToolManager, check_tools_status, install_tool
from .config import Config, load_config, load_config_file
from .logging_config import setup_logging, get_logger

__all__ = [
    "__version__",
    "VERSION",
    # Tools
    "Tool",
    "KNOWN_TOOLS",
    "PACKAGES",
    "get_tool",
    # Foundation
    "PlatformPaths",
    "PosixPaths",
    "WindowsPaths",
    "get_platform_paths",
    "default_local_root",
    "CommandResult",
    "FileSystem",
    "ProcessRunner",
    "LocalFileSystem",
    "SubprocessRunner",
    "Config",
    "load_config",
    "load_config_file",
    # Detection
    "ToolStatus",
    "parse_version",
    "find_binary",
    "probe_version",
    "resolve_tool",
    # Installation
    "find_package_manager",
    "InstallError",
    "PackageManagerNotFound",
    "UnknownTool",
    "DirectoryCreateFailed",
    "InstallationFailed",
    "build_install_command",
    "build_child_environment",
    # Host facade
    "ToolManager",
    "check_tools_status",
    "install_tool",
    # Logging
    "setup_logging",
    "get_logger",
]
