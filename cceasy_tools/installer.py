"""
Installation of assistant CLIs into the local installation root.

Runs ``npm install -g <package> --prefix <local root>`` so the tools land in
a user-owned directory instead of the system-wide npm prefix.
"""

from __future__ import annotations

import os
from typing import Callable, Mapping, Sequence

from .common import vlog
from .package_managers import find_package_manager
from .platform_paths import PlatformPaths
from .system import FileSystem, ProcessRunner
from .tools import get_tool

LogSink = Callable[[str], None]


class InstallError(Exception):
    """
    Base exception for installation errors.

    Attributes:
        message: Human-readable error message
        remediation: Suggested fix for the error
    """
    def __init__(self, message: str, remediation: str | None = None):
        self.message = message
        self.remediation = remediation
        super().__init__(message)


class PackageManagerNotFound(InstallError):
    def __init__(self):
        super().__init__(
            "npm not found. Please ensure Node.js is installed.",
            remediation="Install Node.js (which ships npm) and make sure npm is on PATH",
        )


class UnknownTool(InstallError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown tool: {name}")


class DirectoryCreateFailed(InstallError):
    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to create local node directory: {cause}")


class InstallationFailed(InstallError):
    """
    The package manager could not be started or exited non-zero.

    Attributes:
        tool: Tool name
        cause: Underlying error (OSError, or exit status description)
        output: Combined stdout/stderr of the package manager
    """
    def __init__(self, tool: str, cause: object, output: str = ""):
        self.tool = tool
        self.cause = cause
        self.output = output
        super().__init__(f"failed to install {tool}: {cause}\nOutput: {output}")


def build_install_command(
    npm_path: str,
    package: str,
    paths: PlatformPaths,
) -> list[str]:
    """
    Build the npm command line for a prefixed global install.

    Args:
        npm_path: Path to the npm executable
        package: npm package identifier
        paths: Platform path policy (provides the prefix and wrapping rule)

    Returns:
        Command as an argument list
    """
    args = ["install", "-g", package, "--prefix", paths.local_root]
    if paths.wraps_command(npm_path):
        return ["cmd", "/c", npm_path, *args]
    return [npm_path, *args]


def build_child_environment(
    base_env: Mapping[str, str],
    local_bin_dir: str,
    separator: str = os.pathsep,
) -> dict[str, str]:
    """
    Copy ``base_env`` with ``local_bin_dir`` prepended to PATH.

    The PATH key is matched case-insensitively (Windows uses ``Path``) and
    keeps its original spelling. If there is no PATH at all, one is added.
    """
    env = dict(base_env)
    for key in env:
        if key.upper() == "PATH":
            env[key] = f"{local_bin_dir}{separator}{env[key]}"
            break
    else:
        env["PATH"] = local_bin_dir
    return env


def format_command(command: Sequence[str]) -> str:
    return " ".join(command)


def install_tool(
    name: str,
    paths: PlatformPaths,
    fs: FileSystem,
    runner: ProcessRunner,
    log: LogSink,
    base_env: Mapping[str, str] | None = None,
    verbose: bool = False,
) -> None:
    """
    Install a single tool into the local installation root.

    Args:
        name: Tool name
        paths: Platform path policy
        fs: Filesystem adapter
        runner: Process runner for the npm invocation
        log: Log sink for the host application
        base_env: Environment to derive the child environment from (default: os.environ)
        verbose: Enable verbose logging

    Raises:
        UnknownTool: ``name`` is not a supported tool (nothing else is touched)
        PackageManagerNotFound: npm is neither local nor on PATH
        DirectoryCreateFailed: The local installation root cannot be created
        InstallationFailed: npm could not be started or exited non-zero
    """
    tool = get_tool(name)
    if tool is None:
        raise UnknownTool(name)

    npm_path = find_package_manager(paths, fs, verbose)
    if not npm_path:
        raise PackageManagerNotFound()

    try:
        fs.makedirs(paths.local_root)
    except OSError as e:
        raise DirectoryCreateFailed(paths.local_root, e) from e

    command = build_install_command(npm_path, tool.package, paths)
    env = build_child_environment(
        os.environ if base_env is None else base_env,
        paths.local_bin_dir,
        paths.path_separator,
    )

    log(f"Running installation: {format_command(command)}")

    try:
        result = runner.run(command, env=env, merge_stderr=True)
    except OSError as e:
        raise InstallationFailed(name, e) from e

    if not result.ok:
        raise InstallationFailed(name, f"exit status {result.returncode}", result.output)

    vlog(f"Installed {tool.package} into {paths.local_root}", verbose)
