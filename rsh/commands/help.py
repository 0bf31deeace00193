"""
HELP command - list the permitted commands.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command


@command()
@register_command('help')
def cmd_help(process: Process) -> int:
    """
    List the permitted commands with 1-based indices

    Usage: help

    Arguments are ignored.
    """
    process.stdout.write("The allowed commands are:\n")
    for index, name in process.context.allowlist.enumerate():
        process.stdout.write(f"{index}: {name}\n")
    return 0
