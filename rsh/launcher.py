"""
Process launcher for external commands.

Runs one external program at a time in the foreground. The program is
looked up on PATH, inherits the interpreter's environment, working
directory and standard streams, and gets the default SIGINT action back
before it starts.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Optional

from .exceptions import SpawnError, WaitError
from .signals import describe_status, reset_child_signals

logger = logging.getLogger(__name__)


@dataclass
class ChildStatus:
    """Termination status of one external command"""

    command: str
    pid: int
    returncode: int

    @property
    def signaled(self) -> bool:
        """True if the child was terminated by a signal"""
        return self.returncode < 0

    @property
    def signal_number(self) -> Optional[int]:
        return -self.returncode if self.signaled else None

    @property
    def exit_code(self) -> int:
        """Status in shell convention (128 + signal number when signaled)"""
        if self.signaled:
            return 128 + self.signal_number
        return self.returncode


class ProcessLauncher:
    """
    Spawns external commands and waits for them.

    The launcher owns the child handle for the duration of one command and
    releases it once the child has been reaped.

    Example:
        >>> launcher = ProcessLauncher()
        >>> status = launcher.launch(['ls', '-l'])
        >>> status.returncode
        0
    """

    def __init__(self, preexec: Callable[[], None] = reset_child_signals):
        """
        Initialize the launcher

        Args:
            preexec: Hook run in the child between fork and exec
        """
        self.preexec = preexec

    def spawn(self, argv: List[str]) -> subprocess.Popen:
        """
        Create the child process.

        Args:
            argv: Argument vector, program name first

        Returns:
            Handle of the running child

        Raises:
            SpawnError: If the program cannot be found or executed, or an
                argument holds a NUL byte
        """
        try:
            child = subprocess.Popen(argv, preexec_fn=self.preexec)
        except (OSError, ValueError) as e:
            logger.info("Spawn of %r failed: %s", argv[0], e)
            raise SpawnError(argv[0], e)

        logger.debug("Spawned %r as pid %d", argv[0], child.pid)
        return child

    def wait(self, child: subprocess.Popen) -> ChildStatus:
        """
        Block until the child terminates.

        Raises:
            WaitError: If waiting for the child fails
        """
        try:
            returncode = child.wait()
        except OSError as e:
            logger.info("Wait for pid %d failed: %s", child.pid, e)
            raise WaitError(child.pid, e)

        command = child.args[0] if isinstance(child.args, list) else str(child.args)
        status = ChildStatus(command=command, pid=child.pid, returncode=returncode)
        logger.debug("pid %d %s", child.pid, describe_status(returncode))
        return status

    def launch(self, argv: List[str]) -> ChildStatus:
        """
        Run an external command in the foreground.

        Args:
            argv: Argument vector, program name first

        Returns:
            ChildStatus of the terminated child

        Raises:
            SpawnError: If the child could not be created
            WaitError: If waiting for the child failed
        """
        child = self.spawn(argv)
        return self.wait(child)
