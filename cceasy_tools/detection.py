"""
Local tool detection and version extraction.

A tool counts as installed when its binary is on PATH or inside the local
installation root. Detection never raises: every failure degrades to an
empty field in the returned ToolStatus.
"""

from __future__ import annotations

from dataclasses import dataclass

from .common import vlog
from .platform_paths import PlatformPaths
from .system import FileSystem, ProcessRunner

VERSION_FLAG = "--version"


@dataclass(frozen=True)
class ToolStatus:
    """
    Point-in-time detection result for one tool.

    Attributes:
        name: Tool name
        installed: Whether a runnable binary was located
        version: Version reported by ``--version`` (empty if unknown)
        path: Absolute path to the binary (empty if not installed)
    """
    name: str
    installed: bool = False
    version: str = ""
    path: str = ""

    def __post_init__(self):
        if not self.installed and (self.version or self.path):
            raise ValueError(f"ToolStatus for {self.name}: version/path set on a missing tool")
        if self.installed and not self.path:
            raise ValueError(f"ToolStatus for {self.name}: installed tool needs a path")

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "installed": self.installed,
            "version": self.version,
            "path": self.path,
        }


def parse_version(tool_name: str, output: str) -> str:
    """Extract the version string from ``--version`` output.

    claude prints ``claude-code/0.2.29 darwin-arm64 node-v22.12.0``; the part
    after the slash in the first word is the version. Output of any other
    shape, and output of other tools, is returned as-is (stripped).

    Args:
        tool_name: Tool name
        output: Raw stdout of the version probe

    Returns:
        Version string, possibly empty
    """
    output = output.strip()
    if "claude" in tool_name:
        first = output.split(" ")[0]
        parts = first.split("/")
        if len(parts) == 2:
            return parts[1]
    return output


def find_binary(name: str, paths: PlatformPaths, fs: FileSystem) -> str:
    """Find a tool binary on PATH, falling back to the local installation root.

    Args:
        name: Binary name
        paths: Platform path policy
        fs: Filesystem adapter

    Returns:
        Absolute path to the binary, or empty string if not found
    """
    found = fs.which(name)
    if found:
        return found

    # PATH may not include the local root yet (fresh install, GUI launch)
    for candidate in paths.binary_candidates(name):
        if fs.exists(candidate):
            return candidate

    return ""


def probe_version(tool_name: str, path: str, runner: ProcessRunner, verbose: bool = False) -> str:
    """Run ``<path> --version`` and parse the result.

    Returns an empty string when the process cannot be started or exits
    non-zero.
    """
    try:
        result = runner.run([path, VERSION_FLAG])
    except OSError as e:
        vlog(f"Version probe for {tool_name} failed to start: {e}", verbose)
        return ""

    if not result.ok:
        vlog(f"Version probe for {tool_name} exited with {result.returncode}", verbose)
        return ""

    return parse_version(tool_name, result.output)


def resolve_tool(
    name: str,
    paths: PlatformPaths,
    fs: FileSystem,
    runner: ProcessRunner,
    verbose: bool = False,
) -> ToolStatus:
    """Detect a single tool.

    Args:
        name: Tool name (also its binary name)
        paths: Platform path policy
        fs: Filesystem adapter
        runner: Process runner used for the version probe
        verbose: Enable verbose logging

    Returns:
        ToolStatus; ``installed=False`` with empty fields if nothing was found
    """
    path = find_binary(name, paths, fs)
    if not path:
        vlog(f"{name}: not found on PATH or in {paths.local_root}", verbose)
        return ToolStatus(name=name)

    vlog(f"{name}: found at {path}", verbose)
    version = probe_version(name, path, runner, verbose)
    return ToolStatus(name=name, installed=True, version=version, path=path)
