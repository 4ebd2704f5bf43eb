"""
End-to-end installation scenarios using the real filesystem and subprocesses.

A stub ``npm`` shell script stands in for the package manager, so these tests
exercise PATH lookup, prefix layout, child environment and output capture
without touching the network.
"""

import os
import stat
import sys

import pytest

from cceasy_tools import (
    InstallationFailed,
    PackageManagerNotFound,
    PosixPaths,
    ToolManager,
    ToolStatus,
)

pytestmark = pytest.mark.skipif(
    sys.platform == "win32",
    reason="Stub npm is a POSIX shell script",
)

FAKE_NPM = """#!/bin/sh
PATH="$PATH:/usr/bin:/bin"
pkg="$3"
prefix="$5"
case "$pkg" in
  @anthropic-ai/claude-code) name=claude; version="claude-code/0.2.29 linux-x64 node-v22.12.0" ;;
  @google/gemini-cli) name=gemini; version="0.1.5" ;;
  @openai/codex) name=codex; version="codex-cli 0.1.2504" ;;
esac
printf '%s' "$PATH" > "$prefix/child_path.txt"
mkdir -p "$prefix/bin"
printf '#!/bin/sh\\necho "%s"\\n' "$version" > "$prefix/bin/$name"
chmod +x "$prefix/bin/$name"
echo "added 1 package in 1s"
"""

FAILING_NPM = """#!/bin/sh
echo "npm ERR! code EACCES"
echo "npm ERR! permission denied" >&2
exit 243
"""


def _write_script(path, body):
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def sandbox(tmp_path, monkeypatch):
    """Isolated PATH holding only a bin directory for the stub npm."""
    system_bin = tmp_path / "system-bin"
    system_bin.mkdir()
    monkeypatch.setenv("PATH", str(system_bin))
    local_root = tmp_path / "home" / ".cceasy" / "node"
    return system_bin, local_root


class TestInstallScenarios:
    """Full install and re-detect flows."""

    def test_install_gemini_then_detect(self, sandbox, log):
        system_bin, local_root = sandbox
        _write_script(system_bin / "npm", FAKE_NPM)
        manager = ToolManager(log=log, paths=PosixPaths(str(local_root)))

        assert manager.get_tool_status("gemini") == ToolStatus("gemini")

        manager.install_tool("gemini")

        binary = str(local_root / "bin" / "gemini")
        assert manager.get_tool_status("gemini") == ToolStatus("gemini", True, "0.1.5", binary)
        child_path = (local_root / "child_path.txt").read_text()
        assert child_path.startswith(f"{local_root / 'bin'}{os.pathsep}{system_bin}")
        assert log.messages == [
            f"Running installation: {system_bin / 'npm'} install -g @google/gemini-cli --prefix {local_root}"
        ]

    def test_install_claude_parses_version(self, sandbox, log):
        system_bin, local_root = sandbox
        _write_script(system_bin / "npm", FAKE_NPM)
        manager = ToolManager(log=log, paths=PosixPaths(str(local_root)))

        manager.install_tool("claude")

        statuses = manager.check_all_tools_status()
        assert [s.name for s in statuses] == ["claude", "gemini", "codex"]
        assert statuses[0].version == "0.2.29"
        assert statuses[1].installed is False
        assert statuses[2].installed is False

    def test_local_npm_preferred_over_system(self, sandbox, log):
        system_bin, local_root = sandbox
        _write_script(system_bin / "npm", FAILING_NPM)
        (local_root / "bin").mkdir(parents=True)
        _write_script(local_root / "bin" / "npm", FAKE_NPM)
        manager = ToolManager(log=log, paths=PosixPaths(str(local_root)))

        manager.install_tool("codex")

        assert manager.get_tool_status("codex").version == "codex-cli 0.1.2504"

    def test_npm_missing_creates_nothing(self, sandbox, log):
        _, local_root = sandbox
        manager = ToolManager(log=log, paths=PosixPaths(str(local_root)))

        with pytest.raises(PackageManagerNotFound):
            manager.install_tool("claude")

        assert not local_root.exists()
        assert log.messages == []

    def test_failed_install_reports_output(self, sandbox, log):
        system_bin, local_root = sandbox
        _write_script(system_bin / "npm", FAILING_NPM)
        manager = ToolManager(log=log, paths=PosixPaths(str(local_root)))

        with pytest.raises(InstallationFailed) as exc_info:
            manager.install_tool("claude")

        message = str(exc_info.value)
        assert "npm ERR! permission denied" in message
        assert "npm ERR! code EACCES" in message
        assert "exit status 243" in message
        assert local_root.is_dir()
        assert manager.get_tool_status("claude") == ToolStatus("claude")
