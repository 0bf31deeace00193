"""Allowlist of command names permitted to run in rsh.

This module provides the Allowlist class which handles:
- Holding the fixed, ordered set of permitted command names
- Exact-match membership checks on the first token of a line
- Enumerating the names for the help built-in
"""

from typing import Iterable, Iterator, Tuple


DEFAULT_ALLOWED_COMMANDS: Tuple[str, ...] = (
    "cp", "touch", "mkdir", "ls", "pwd", "cat",
    "grep", "chmod", "diff", "cd", "exit", "help",
)


class Allowlist:
    """Immutable set of permitted command names.

    Membership is exact string equality: no prefix, case folding or path
    handling is applied. Registration order is preserved for listing.

    Example:
        >>> allowlist = Allowlist(["ls", "cd"])
        >>> allowlist.is_allowed("ls")
        True
        >>> allowlist.is_allowed("/bin/ls")
        False

    Attributes:
        _names: Names in registration order
        _lookup: Frozen set used for membership checks
    """

    __slots__ = ("_names", "_lookup")

    def __init__(self, names: Iterable[str] = DEFAULT_ALLOWED_COMMANDS):
        """Initialize the allowlist.

        Duplicate names keep their first position.

        Args:
            names: Permitted command names
        """
        ordered = tuple(dict.fromkeys(names))
        object.__setattr__(self, "_names", ordered)
        object.__setattr__(self, "_lookup", frozenset(ordered))

    def __setattr__(self, name, value):
        raise AttributeError("Allowlist is read-only")

    def is_allowed(self, command: str) -> bool:
        """Check whether a command name may run.

        Args:
            command: First token of the argument vector

        Returns:
            True if the name is on the allowlist
        """
        return command in self._lookup

    def names(self) -> Tuple[str, ...]:
        """Get all permitted names in registration order."""
        return self._names

    def enumerate(self) -> Iterator[Tuple[int, str]]:
        """Yield (index, name) pairs with 1-based indices."""
        return enumerate(self._names, start=1)

    def __contains__(self, command: str) -> bool:
        return self.is_allowed(command)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Allowlist({list(self._names)!r})"
