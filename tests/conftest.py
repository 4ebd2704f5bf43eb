"""
Shared test doubles: a fake filesystem and process runner that record every call.
"""

import pytest

from cceasy_tools.platform_paths import PosixPaths, WindowsPaths
from cceasy_tools.system import CommandResult, FileSystem, ProcessRunner


class FakeFileSystem(FileSystem):
    """In-memory filesystem with a fixed PATH lookup table."""

    def __init__(self, files=(), on_path=None, makedirs_error=None):
        self.files = set(files)
        self.on_path = dict(on_path or {})
        self.makedirs_error = makedirs_error
        self.created = []
        self.calls = []

    def exists(self, path):
        self.calls.append(("exists", path))
        return path in self.files or path in self.created

    def which(self, name):
        self.calls.append(("which", name))
        return self.on_path.get(name)

    def makedirs(self, path):
        self.calls.append(("makedirs", path))
        if self.makedirs_error is not None:
            raise self.makedirs_error
        self.created.append(path)


class FakeProcessRunner(ProcessRunner):
    """Returns canned results keyed by executable; records every invocation."""

    def __init__(self, results=None, errors=None, default=None):
        self.results = dict(results or {})
        self.errors = dict(errors or {})
        self.default = default or CommandResult(returncode=0, output="")
        self.calls = []

    def run(self, args, env=None, merge_stderr=False):
        args = list(args)
        self.calls.append({"args": args, "env": env, "merge_stderr": merge_stderr})
        if args[0] in self.errors:
            raise self.errors[args[0]]
        return self.results.get(args[0], self.default)


class RecordingLog:
    def __init__(self):
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)


@pytest.fixture
def posix_paths():
    return PosixPaths("/home/user/.cceasy/node")


@pytest.fixture
def windows_paths():
    return WindowsPaths("C:\\Users\\user\\.cceasy\\node")


@pytest.fixture
def log():
    return RecordingLog()
