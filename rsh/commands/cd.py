"""
CD command - change the working directory.
"""

import logging
import os

from ..process import Process
from ..command_decorators import command
from ..exceptions import EnvironmentError
from . import register_command

logger = logging.getLogger(__name__)


@command(max_args=1, usage="cd [dir]")
@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change the working directory of the interpreter

    Usage: cd [dir]

    Without an argument, changes to $HOME, or to / when HOME is unset.
    The directory is left unchanged on failure.
    """
    if process.args:
        target = process.args[0]
    else:
        target = process.context.get_variable('HOME')
        if target is None:
            target = '/'

    try:
        os.chdir(target)
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL byte in the path
        raise EnvironmentError('cd', target, e)

    logger.debug("Changed directory to %s", process.context.cwd)
    return 0
