"""
Decorator attaching metadata to built-in commands.
"""

from typing import Callable, Optional


def command(max_args: Optional[int] = None, usage: str = "") -> Callable:
    """
    Mark a function as a built-in command.

    The metadata is read by Process.execute().

    Args:
        max_args: Maximum number of arguments after the command name
                  (None = unlimited). Process.execute() raises UsageError
                  before the command body runs when it is exceeded.
        usage: Usage string shown on argument errors

    Example:
        @command(max_args=1, usage="cd [dir]")
        @register_command('cd')
        def cmd_cd(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        func.max_args = max_args
        func.usage = usage
        return func

    return decorator
