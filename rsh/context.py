"""
CommandContext - Encapsulates all context needed for built-in execution.

This module provides the CommandContext dataclass that decouples built-ins
from the Shell class, making them testable without a running loop.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional
import os

from .allowlist import Allowlist


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for built-in execution.

    This provides built-ins with access to:
    - Environment variables (read-only view)
    - The allowlist (for listing)

    The working directory is the process working directory; built-ins
    change it with os.chdir() and read it with the ``cwd`` property.

    Example:
        >>> from rsh.context import CommandContext
        >>> ctx = CommandContext(env={'HOME': '/home/alice'})
        >>> ctx.get_variable('HOME')
        '/home/alice'
    """

    env: Mapping[str, str] = field(default_factory=lambda: os.environ)
    allowlist: Allowlist = field(default_factory=Allowlist)

    @property
    def cwd(self) -> str:
        """Current working directory of the interpreter process"""
        return os.getcwd()

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Variable name

        Returns:
            Variable value or None if not set

        Examples:
            >>> ctx = CommandContext(env={'USER': 'alice'})
            >>> ctx.get_variable('USER')
            'alice'
            >>> ctx.get_variable('MISSING') is None
            True
        """
        return self.env.get(name)
