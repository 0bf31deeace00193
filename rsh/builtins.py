"""
Built-in shell commands registry.

The built-ins live in the commands/ directory. This module loads them and
exposes a read-only view of the registry.
"""

from types import MappingProxyType
from typing import Callable, NamedTuple, Optional, Tuple

from .commands import load_all_commands


class BuiltinEntry(NamedTuple):
    """A (name, handler) pair from the registry"""
    name: str
    handler: Callable


# Load all command modules to populate the registry
BUILTINS = MappingProxyType(dict(load_all_commands()))

ENTRIES: Tuple[BuiltinEntry, ...] = tuple(
    BuiltinEntry(name, handler) for name, handler in BUILTINS.items()
)


def get_builtin(command: str) -> Optional[Callable]:
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('cd')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)
