#!/usr/bin/env python3
"""
Shell Commander Package
A minimal Unix-like shell over an in-memory folder tree
"""

__version__ = '1.0.0'
__author__ = 'Shell Commander Team'

from .filesystem import FolderNode, FolderTree
from .commands import Command, CommandRegistry, default_registry
from .shell import ShellSession, INITIAL_PROMPT
from .terminal import Terminal, BufferedTerminal
from .exceptions import ShellError, PathNotFoundError

__all__ = [
    'FolderNode',
    'FolderTree',
    'Command',
    'CommandRegistry',
    'default_registry',
    'ShellSession',
    'INITIAL_PROMPT',
    'Terminal',
    'BufferedTerminal',
    'ShellError',
    'PathNotFoundError'
]
