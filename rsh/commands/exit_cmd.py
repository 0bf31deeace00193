"""
EXIT command - leave the interpreter with an optional exit status.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..control_flow import ExitRequest
from . import register_command
from .base import parse_status


@command(usage="exit [n]")
@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Exit the interpreter with an optional exit status

    Usage: exit [n]

    Arguments after the first are ignored.

    Examples:
        exit        # Exit with status 0
        exit 7      # Exit with status 7
        exit abc    # Non-numeric, exits with status 0
    """
    status = parse_status(process.args[0]) if process.args else 0
    raise ExitRequest(status)
