#!/usr/bin/env python3
"""
Shell Session - Parses input lines and runs them against a folder tree
"""

import logging
from typing import Optional, Tuple

from .commands import CommandRegistry, default_registry
from .exceptions import ShellError
from .filesystem import FolderNode, FolderTree
from .terminal import Terminal

logger = logging.getLogger(__name__)

PROMPT_USER = 'user'
PROMPT_HOST = 'shellcommander'
NOT_IMPLEMENTED = 'Command not implemented!'


def format_prompt(cwd: str) -> str:
    """Build the prompt from the last segment of a working directory"""
    label = cwd.split('/')[-1] or '/'
    return f"[{PROMPT_USER}@{PROMPT_HOST} {label}]$ "


INITIAL_PROMPT = format_prompt('/')


class ShellSession:
    """One terminal's folder tree, command table and working directory"""

    def __init__(self, terminal: Terminal, tree: Optional[FolderTree] = None,
                 registry: Optional[CommandRegistry] = None):
        self.terminal = terminal
        self.tree = tree if tree is not None else FolderTree()
        self.registry = registry if registry is not None else default_registry()
        self.cwd = self.tree.root.full_path

    @staticmethod
    def parse_command(line: str) -> Tuple[str, str]:
        """Split a line into the command word and the raw argument text"""
        parts = line.strip().split(None, 1)
        if not parts:
            return '', ''
        return parts[0], parts[1] if len(parts) > 1 else ''

    def current_folder(self) -> FolderNode:
        """Get the node the working directory points at"""
        folder = self.tree.resolve(self.cwd)
        if folder is None:
            raise ShellError(f"Working directory {self.cwd} is missing")
        return folder

    def echo(self, line: str):
        self.terminal.echo(line)

    def compute_prompt(self) -> str:
        return format_prompt(self.cwd)

    def submit(self, line: str):
        """Run one input line, writing output and the new prompt to the terminal"""
        command, args = self.parse_command(line)
        if not command:
            return

        try:
            found = self.registry.dispatch(self, command, args)
        except ShellError as e:
            logger.warning(f"{command} failed in {self.cwd}: {e}")
            self.echo(str(e))
            found = True

        if not found:
            self.echo(NOT_IMPLEMENTED)
            return

        self.terminal.set_prompt(self.compute_prompt())
