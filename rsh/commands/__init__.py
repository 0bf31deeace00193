"""
Built-in command modules.

Each module defines one command and registers it with @register_command.
Registration order is the order of _COMMAND_MODULES.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

_COMMAND_MODULES = ('cd', 'exit_cmd', 'help')


def register_command(name: str) -> Callable:
    """
    Register a function as the built-in handler for a command name.

    Args:
        name: Command name as typed by the user

    Example:
        @register_command('cd')
        def cmd_cd(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[name] = func
        return func

    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every command module so its handler is registered"""
    for module_name in _COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')
    return BUILTINS
