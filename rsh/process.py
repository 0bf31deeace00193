"""Process class for in-process built-in execution"""

import sys
from typing import List, Optional, Callable, TextIO

from .context import CommandContext
from .control_flow import ControlFlowException
from .exceptions import ShellError, UsageError


class Process:
    """Represents a single built-in invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        executor: Callable,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments (without the command name)
            executor: Callable that executes the command
            stdout: Output stream (default: sys.stdout)
            stderr: Error stream (default: sys.stderr)
            context: CommandContext with the execution context
        """
        self.command = command
        self.args = args
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.executor = executor
        self.context = context or CommandContext()
        self.exit_code = 0

    def execute(self) -> int:
        """
        Execute the process

        Shell errors raised by the executor are reported on stderr and
        turned into the exit code. Control flow exceptions propagate.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self._check_arg_count()
            self.exit_code = self.executor(self)
        except ControlFlowException:
            # exit is handled by the dispatch loop
            raise
        except ShellError as e:
            self.stderr.write(f"{e}\n")
            self.exit_code = e.exit_code

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def _check_arg_count(self):
        """Enforce the max_args declared with @command()"""
        max_args = getattr(self.executor, 'max_args', None)
        if max_args is not None and len(self.args) > max_args:
            raise UsageError(self.command, "too many arguments",
                             usage=getattr(self.executor, 'usage', ''))

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
