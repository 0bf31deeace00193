"""
Tests for Process class.

Tests cover:
- Process initialization
- Exit code management
- Error reporting from built-ins
- Control flow propagation
"""

import pytest

from rsh.command_decorators import command
from rsh.context import CommandContext
from rsh.control_flow import ExitRequest
from rsh.exceptions import EnvironmentError, UsageError
from rsh.process import Process


class TestProcessInitialization:
    """Test Process class initialization."""

    def test_process_creation_with_minimal_args(self):
        """Test creating process with minimal arguments."""
        process = Process(command='test', args=['arg1', 'arg2'], executor=lambda p: 0)

        assert process.command == 'test'
        assert process.args == ['arg1', 'arg2']
        assert process.stdout is not None
        assert process.stderr is not None
        assert isinstance(process.context, CommandContext)
        assert process.exit_code == 0

    def test_process_with_context(self):
        """Test the context is passed through to the executor."""
        context = CommandContext(env={'HOME': '/home/test'})
        seen = []
        process = Process(command='test', args=[], executor=lambda p: seen.append(p.context) or 0,
                          context=context)

        assert process.execute() == 0
        assert seen[0] is context

    def test_repr(self):
        """Test the representation shows command and arguments."""
        assert repr(Process(command='cd', args=['/tmp'], executor=lambda p: 0)) == "Process(cd /tmp)"


class TestProcessExecution:
    """Test process execution."""

    def test_executor_exit_code(self, capture_output):
        """Test the executor's return value becomes the exit code."""
        stdout, stderr = capture_output
        process = Process('t', [], stdout=stdout, stderr=stderr, executor=lambda p: 3)

        assert process.execute() == 3
        assert process.exit_code == 3

    def test_executor_writes_output(self, capture_output):
        """Test executors write through the process streams."""
        stdout, stderr = capture_output

        def executor(process):
            process.stdout.write("out\n")
            process.stderr.write("err\n")
            return 0

        Process('t', [], stdout=stdout, stderr=stderr, executor=executor).execute()
        assert stdout.getvalue() == "out\n"
        assert stderr.getvalue() == "err\n"

    def test_shell_error_reported(self, capture_output):
        """Test shell errors are written to stderr and become the exit code."""
        stdout, stderr = capture_output

        def executor(process):
            raise EnvironmentError('cd', '/missing', FileNotFoundError(2, 'No such file or directory'))

        process = Process('cd', [], stdout=stdout, stderr=stderr, executor=executor)
        assert process.execute() == 1
        assert stderr.getvalue() == "cd: /missing: No such file or directory\n"

    def test_exit_request_propagates(self, capture_output):
        """Test control flow exceptions are not swallowed."""
        stdout, stderr = capture_output

        def executor(process):
            raise ExitRequest(5)

        process = Process('exit', [], stdout=stdout, stderr=stderr, executor=executor)
        with pytest.raises(ExitRequest):
            process.execute()

    def test_unexpected_errors_propagate(self, capture_output):
        """Test non-shell exceptions are not hidden."""
        stdout, stderr = capture_output

        def executor(process):
            raise RuntimeError("bug")

        process = Process('t', [], stdout=stdout, stderr=stderr, executor=executor)
        with pytest.raises(RuntimeError):
            process.execute()


class TestArgumentLimit:
    """Test the max_args metadata from @command()."""

    def test_too_many_arguments(self, capture_output):
        """Test extra arguments are rejected before the body runs."""
        stdout, stderr = capture_output
        calls = []

        @command(max_args=1, usage="t [x]")
        def executor(process):
            calls.append(process.args)
            return 0

        process = Process('t', ['a', 'b'], stdout=stdout, stderr=stderr, executor=executor)
        assert process.execute() == 1
        assert calls == []
        assert stderr.getvalue() == "rsh: t: too many arguments\nusage: t [x]\n"

    def test_within_limit(self, capture_output):
        """Test the body runs when the count is within the limit."""
        stdout, stderr = capture_output

        @command(max_args=1)
        def executor(process):
            return 0

        assert Process('t', ['a'], stdout=stdout, stderr=stderr, executor=executor).execute() == 0

    def test_usage_error_without_usage_string(self):
        """Test a usage error without usage text prints only the message."""
        assert str(UsageError('t', 'bad')) == "rsh: t: bad"
