"""
Custom exception hierarchy for rsh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

None of these errors terminate the interpreter. The dispatch loop reports
them to the user and prompts again.

Usage:
    from rsh.exceptions import SpawnError

    try:
        launcher.launch(argv)
    except SpawnError as e:
        stderr.write(f"{e}\\n")
"""

import errno
from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


def _strerror(error: Exception) -> str:
    """Return the bare OS error text (``No such file or directory``)."""
    return getattr(error, 'strerror', None) or str(error)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when a command cannot be dispatched or a built-in fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class RejectionError(CommandError):
    """
    Raised when the command name is not on the allowlist.

    Example:
        raise RejectionError("rm")
    """

    MESSAGE = "NOT ALLOWED!"

    def __init__(self, command: str):
        super().__init__(command, self.MESSAGE, exit_code=126)


class UsageError(CommandError):
    """
    Raised when a built-in is invoked with malformed arguments.

    Example:
        raise UsageError("cd", "too many arguments", usage="cd [dir]")
    """

    def __init__(self, command: str, details: str, usage: str = ""):
        super().__init__(command, f"rsh: {command}: {details}", exit_code=1)
        self.details = details
        self.usage = usage

    def __str__(self):
        if self.usage:
            return f"{self.message}\nusage: {self.usage}"
        return self.message


# The name the built-in contracts use for the same condition
ArgumentError = UsageError


class EnvironmentError(CommandError):
    """
    Raised when the OS action a built-in requested fails.

    Example:
        raise EnvironmentError("cd", "/missing", os_error)
    """

    def __init__(self, command: str, target: str, os_error: Exception):
        message = f"{command}: {target}: {_strerror(os_error)}"
        super().__init__(command, message, exit_code=1)
        self.target = target
        self.os_error = os_error


# =============================================================================
# Process Errors
# =============================================================================

class ProcessError(ShellError):
    """
    Base class for external process errors.

    Raised by the launcher when a child cannot be created or awaited.
    """

    def __init__(self, message: str, os_error: Optional[Exception] = None, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.os_error = os_error


class SpawnError(ProcessError):
    """
    Raised when an external process could not be created.

    Example:
        raise SpawnError("ls", os_error)
    """

    def __init__(self, command: str, os_error: Exception):
        # Same conventions as POSIX shells: 127 not found, 126 not executable
        exit_code = 127 if getattr(os_error, 'errno', None) == errno.ENOENT else 126
        message = f"rsh: spawn: {command}: {_strerror(os_error)}"
        super().__init__(message, os_error, exit_code=exit_code)
        self.command = command


class WaitError(ProcessError):
    """
    Raised when waiting for a child process fails.

    Example:
        raise WaitError(4242, os_error)
    """

    def __init__(self, pid: int, os_error: OSError):
        super().__init__(f"rsh: wait: {_strerror(os_error)}", os_error)
        self.pid = pid


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigValidationError(ShellError):
    """
    Raised when the shell configuration is invalid.

    Example:
        raise ConfigValidationError("max_args must be at least 1")
    """

    def __init__(self, message: str):
        super().__init__(message, exit_code=2)
