"""
Filesystem and process-execution adapters.

The resolver and installer only touch the outside world through these two
interfaces, so tests can swap in recorders that never hit the real disk or
spawn processes.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a finished process.

    Attributes:
        returncode: Process exit code
        output: Captured stdout (or stdout and stderr merged, in emission order)
    """
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class FileSystem:
    """Filesystem operations used by the resolver and installer."""

    def exists(self, path: str) -> bool:
        raise NotImplementedError

    def which(self, name: str) -> str | None:
        """Look ``name`` up on the process search path; absolute path or None."""
        raise NotImplementedError

    def makedirs(self, path: str) -> None:
        """Create ``path`` and its parents; an existing directory is not an error."""
        raise NotImplementedError


class ProcessRunner:
    """Runs a command to completion and captures its output."""

    def run(
        self,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
        merge_stderr: bool = False,
    ) -> CommandResult:
        """
        Run ``args`` and wait for it to exit.

        Args:
            args: Command and arguments
            env: Full environment for the child (None inherits the current one)
            merge_stderr: Capture stderr into the same stream as stdout

        Returns:
            CommandResult with exit code and captured output

        Raises:
            OSError: If the process cannot be started
        """
        raise NotImplementedError


class LocalFileSystem(FileSystem):
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def which(self, name: str) -> str | None:
        path = shutil.which(name)
        return os.path.abspath(path) if path else None

    def makedirs(self, path: str) -> None:
        os.makedirs(path, mode=0o755, exist_ok=True)


class SubprocessRunner(ProcessRunner):
    def run(
        self,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
        merge_stderr: bool = False,
    ) -> CommandResult:
        proc = subprocess.run(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,  # Isolate stdin
            text=True,
            errors="replace",
            env=dict(env) if env is not None else None,
            check=False,
        )
        return CommandResult(returncode=proc.returncode, output=proc.stdout or "")
