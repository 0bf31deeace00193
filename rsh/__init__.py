"""rsh - a restricted interactive command interpreter"""

__version__ = "1.0.0"

from .allowlist import Allowlist, DEFAULT_ALLOWED_COMMANDS
from .config import ShellConfig, load_config
from .shell import Outcome, Shell
from .tokenizer import ArgumentVector, MAX_ARGS, tokenize

__all__ = [
    'Allowlist',
    'ArgumentVector',
    'DEFAULT_ALLOWED_COMMANDS',
    'MAX_ARGS',
    'Outcome',
    'Shell',
    'ShellConfig',
    'load_config',
    'tokenize',
]
