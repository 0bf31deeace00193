"""Dispatch loop for the restricted shell"""

import enum
import logging
import sys
from typing import Optional, TextIO

from .builtins import get_builtin
from .config import ShellConfig
from .context import CommandContext
from .control_flow import ExitRequest
from .exceptions import ProcessError, RejectionError, ShellError
from .launcher import ProcessLauncher
from .process import Process
from .signals import InterruptDisposition
from .tokenizer import ArgumentVector, strip_newline, tokenize

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """What the loop did with one input line"""
    EMPTY = "empty"
    INVALID = "invalid"
    REJECTED = "rejected"
    BUILTIN = "builtin"
    EXTERNAL = "external"
    EXIT = "exit"


class Shell:
    """
    Restricted interactive shell.

    Reads one line at a time, splits it on whitespace, checks the command
    name against the allowlist and then runs a built-in in-process or an
    external program through the launcher. Only end-of-input and the exit
    built-in end the loop.
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        launcher: Optional[ProcessLauncher] = None,
    ):
        self.config = config or ShellConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.launcher = launcher or ProcessLauncher()
        self.allowlist = self.config.build_allowlist()
        self.context = CommandContext(allowlist=self.allowlist)
        self.disposition = InterruptDisposition(ignore=self.config.ignore_interrupt)

        self.last_status = 0
        self.exit_status: Optional[int] = None

    def prompt(self):
        """Write the prompt to stderr without a newline"""
        self.stderr.write(self.config.prompt)
        self.stderr.flush()

    def read_line(self) -> Optional[str]:
        """
        Read one line from stdin.

        Returns:
            The line with the newline removed, or None at end of input
        """
        try:
            raw = self.stdin.readline()
        except OSError as e:
            logger.info("Read from stdin failed, treating as end of input: %s", e)
            return None

        if not raw:
            return None
        return strip_newline(raw)

    def run(self) -> int:
        """
        Run the dispatch loop until end of input or exit.

        Returns:
            Exit status for the interpreter process
        """
        logger.debug("Starting with configuration %s", self.config.to_dict())
        self.disposition.install()

        while True:
            self.prompt()
            try:
                line = self.read_line()
            except KeyboardInterrupt:
                # Only reachable when the interrupt is not ignored
                self.stderr.write("\n")
                continue

            if line is None:
                logger.debug("End of input")
                return 0

            outcome = self.execute(line)
            if outcome is Outcome.EXIT:
                logger.debug("exit requested with status %d", self.exit_status)
                return self.exit_status

    def execute(self, line: str) -> Outcome:
        """
        Dispatch one command line.

        Args:
            line: Input line without its newline

        Returns:
            What was done with the line
        """
        try:
            argv = tokenize(line, self.config.max_args, strict=self.config.strict_args)
        except ShellError as e:
            self.stderr.write(f"{e}\n")
            self.last_status = e.exit_code
            return Outcome.INVALID

        if argv.is_empty():
            return Outcome.EMPTY

        if not self.allowlist.is_allowed(argv.command):
            return self._reject(argv)

        executor = get_builtin(argv.command)
        if executor is not None:
            return self._run_builtin(argv, executor)

        return self._run_external(argv)

    def _reject(self, argv: ArgumentVector) -> Outcome:
        error = RejectionError(argv.command)
        logger.info("Rejected command %r", argv.command)
        self.stdout.write(f"{error}\n")
        self.stdout.flush()
        self.last_status = error.exit_code
        return Outcome.REJECTED

    def _run_builtin(self, argv: ArgumentVector, executor) -> Outcome:
        process = Process(
            command=argv.command,
            args=argv.arguments,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=executor,
            context=self.context,
        )
        try:
            self.last_status = process.execute()
        except ExitRequest as request:
            self.exit_status = request.status
            return Outcome.EXIT
        return Outcome.BUILTIN

    def _run_external(self, argv: ArgumentVector) -> Outcome:
        # Keep our buffered output ahead of the child's
        self.stdout.flush()
        self.stderr.flush()

        try:
            status = self.launcher.launch(list(argv))
        except ProcessError as e:
            self.stderr.write(f"{e}\n")
            self.stderr.flush()
            self.last_status = e.exit_code
            return Outcome.EXTERNAL

        self.last_status = status.exit_code
        return Outcome.EXTERNAL
