"""
Interrupt signal disposition for the interpreter and its children.

The interpreter ignores SIGINT for its whole lifetime so that Ctrl-C at the
prompt does not kill it. Every child resets SIGINT to the default action for
itself before exec, which keeps external programs interruptible.
"""

import logging
import signal
from dataclasses import dataclass
from typing import Callable, Union

logger = logging.getLogger(__name__)

Handler = Union[Callable, int, None]


@dataclass
class InterruptDisposition:
    """
    Process-wide SIGINT disposition applied once at startup.

    Example:
        >>> disposition = InterruptDisposition()
        >>> disposition.install()      # interpreter now ignores SIGINT
        >>> disposition.restore()      # previous handler back in place
    """

    ignore: bool = True
    _previous: Handler = None
    _installed: bool = False

    @property
    def installed(self) -> bool:
        return self._installed

    def install(self) -> None:
        """Ignore SIGINT in the interpreter process"""
        if not self.ignore or self._installed:
            return
        self._previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
        self._installed = True
        logger.debug("SIGINT ignored in interpreter (previous handler: %r)", self._previous)

    def restore(self) -> None:
        """Put back the handler that was active before install()"""
        if not self._installed:
            return
        previous = self._previous if self._previous is not None else signal.SIG_DFL
        signal.signal(signal.SIGINT, previous)
        self._installed = False
        logger.debug("SIGINT handler restored")

    def __enter__(self):
        self.install()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.restore()
        return False


def reset_child_signals() -> None:
    """
    Restore the default SIGINT action.

    Runs in the forked child just before exec; it only changes the child.
    """
    signal.signal(signal.SIGINT, signal.SIG_DFL)


def describe_status(returncode: int) -> str:
    """Render a subprocess return code for logs"""
    if returncode < 0:
        try:
            name = signal.Signals(-returncode).name
        except ValueError:
            name = f"signal {-returncode}"
        return f"killed by {name}"
    return f"exited with status {returncode}"
