"""
Pytest configuration and shared fixtures for rsh tests.

This module provides reusable test fixtures for:
- In-memory stdin/stdout/stderr streams
- Shell instances fed from scripted input
- A recording launcher that never spawns anything
- Saving and restoring the SIGINT handler
"""

import io
import signal
from typing import List

import pytest

from rsh.config import ShellConfig
from rsh.context import CommandContext
from rsh.launcher import ChildStatus
from rsh.process import Process
from rsh.shell import Shell


# ============================================================================
# Fakes
# ============================================================================

class RecordingLauncher:
    """
    Launcher stand-in that records argument vectors instead of spawning.

    Set ``error`` to make every launch raise it.
    """

    def __init__(self, returncode: int = 0):
        self.calls: List[List[str]] = []
        self.returncode = returncode
        self.error = None

    def launch(self, argv: List[str]) -> ChildStatus:
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return ChildStatus(command=argv[0], pid=4242, returncode=self.returncode)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides stdout and stderr capture streams.

    Usage:
        def test_command_output(capture_output):
            stdout, stderr = capture_output
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def recording_launcher():
    """Provides a launcher that records calls and never spawns."""
    return RecordingLauncher()


@pytest.fixture
def restore_sigint():
    """Restores the SIGINT handler that was active before the test."""
    previous = signal.getsignal(signal.SIGINT)
    yield previous
    signal.signal(signal.SIGINT, previous)


@pytest.fixture
def make_shell(capture_output, recording_launcher, restore_sigint):
    """
    Factory building a Shell whose stdin is the given lines.

    The returned shell uses the capture streams and the recording launcher
    unless overridden.

    Usage:
        def test_exit(make_shell):
            shell = make_shell("exit 3\\n")
            assert shell.run() == 3
    """
    stdout, stderr = capture_output

    def factory(text: str = "", config: ShellConfig = None, launcher=None) -> Shell:
        return Shell(
            config=config or ShellConfig(),
            stdin=io.StringIO(text),
            stdout=stdout,
            stderr=stderr,
            launcher=launcher or recording_launcher,
        )

    return factory


@pytest.fixture
def make_process(capture_output):
    """
    Factory building a Process for a built-in with captured streams.

    Usage:
        def test_help(make_process):
            process = make_process('help', [], cmd_help)
    """
    stdout, stderr = capture_output

    def factory(command: str, args: List[str], executor, env=None) -> Process:
        context = CommandContext(env=env if env is not None else {})
        return Process(
            command=command,
            args=args,
            stdout=stdout,
            stderr=stderr,
            executor=executor,
            context=context,
        )

    return factory
