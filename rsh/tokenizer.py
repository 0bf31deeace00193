"""
Tokenizer for rsh command lines.

Splits one line of input into whitespace-delimited tokens. There is no
quoting, escaping or expansion: a space or tab always separates tokens.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import UsageError

logger = logging.getLogger(__name__)

# Usable argument slots; the end of the list is the terminator
MAX_ARGS = 20

_SEPARATORS = re.compile(r'[ \t]+')


@dataclass
class ArgumentVector:
    """
    Ordered tokens parsed from one command line.

    The vector holds at most ``max_args`` tokens. Tokens beyond the bound
    are dropped and counted in ``dropped`` so callers can surface the
    truncation if they want to.

    Example:
        >>> argv = tokenize("  ls   -l ")
        >>> argv.args
        ['ls', '-l']
        >>> argv.command
        'ls'
    """

    args: List[str] = field(default_factory=list)
    max_args: int = MAX_ARGS
    dropped: int = 0

    @property
    def argc(self) -> int:
        return len(self.args)

    @property
    def command(self) -> Optional[str]:
        """First token (the command name), or None for an empty line"""
        return self.args[0] if self.args else None

    @property
    def arguments(self) -> List[str]:
        """Tokens after the command name"""
        return self.args[1:]

    @property
    def truncated(self) -> bool:
        return self.dropped > 0

    def is_empty(self) -> bool:
        return not self.args

    def __len__(self) -> int:
        return len(self.args)

    def __iter__(self):
        return iter(self.args)

    def __getitem__(self, index):
        return self.args[index]


def strip_newline(line: str) -> str:
    """Cut a raw input line at its first newline"""
    return line.split('\n', 1)[0]


def tokenize(line: str, max_args: int = MAX_ARGS, strict: bool = False) -> ArgumentVector:
    """
    Split a command line into an ArgumentVector.

    Args:
        line: Input line with the trailing newline already removed
        max_args: Maximum number of tokens kept
        strict: Raise UsageError instead of truncating an over-long line

    Returns:
        ArgumentVector with empty tokens discarded

    Raises:
        UsageError: If strict is set and the line has more than max_args tokens
    """
    tokens = [token for token in _SEPARATORS.split(line) if token]
    argv = ArgumentVector(args=tokens[:max_args], max_args=max_args,
                          dropped=max(0, len(tokens) - max_args))

    if argv.truncated:
        if strict:
            raise UsageError(tokens[0], f"too many arguments (limit {max_args})")
        logger.debug("Dropped %d token(s) beyond the %d argument limit",
                     argv.dropped, max_args)

    return argv
