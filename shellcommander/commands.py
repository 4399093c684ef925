#!/usr/bin/env python3
"""
Commands - Name to handler table and the built-in folder commands
"""

import logging
from typing import Callable, List, Optional

from .exceptions import PathNotFoundError
from .filesystem import FolderNode, FolderTree

logger = logging.getLogger(__name__)

# Names per ls output row
ROW_LENGTH = 11

Handler = Callable[..., None]


class Command:
    """Binds a command name to the function that runs it"""

    def __init__(self, name: str, handler: Handler):
        self.name = name
        self.handler = handler

    def execute(self, session, args: str):
        """Run the handler against a session"""
        self.handler(session, args)

    def __repr__(self) -> str:
        return f"Command({self.name!r})"


class CommandRegistry:
    """Ordered list of commands, looked up by exact name.

    Registering a name twice keeps both entries; dispatch always runs
    the one registered first.
    """

    def __init__(self):
        self.commands: List[Command] = []

    def register(self, name: str, handler: Handler) -> Command:
        """Append a command to the table"""
        command = Command(name, handler)
        self.commands.append(command)
        return command

    def find(self, name: str) -> Optional[Command]:
        """Get the first command registered under name"""
        for command in self.commands:
            if command.name == name:
                return command
        return None

    def dispatch(self, session, name: str, args: str) -> bool:
        """Run the named command, returning whether it was found"""
        command = self.find(name)
        if command is None:
            logger.info(f"No command registered for {name!r}")
            return False

        command.execute(session, args)
        return True

    def names(self) -> List[str]:
        return [command.name for command in self.commands]


def cmd_ls(session, args: str):
    """List the current folder's children, ROW_LENGTH names per line"""
    folder = session.current_folder()
    names = [child.name for child in session.tree.children_of(folder)]

    for start in range(0, len(names), ROW_LENGTH):
        session.echo(' '.join(names[start:start + ROW_LENGTH]))


def _resolve_relative_parent(tree: FolderTree, current: FolderNode,
                             path: str) -> Optional[FolderNode]:
    """Resolve a path such as ../Documents or ../../etc from current"""
    node = current
    for segment in path.split('/'):
        if segment in ('', '.'):
            continue
        if segment == '..':
            node = tree.parent_of(node)
        else:
            node = tree.get_child_by_name(node, segment)
        if node is None:
            return None
    return node


def cmd_cd(session, args: str):
    """Change the working directory.

    Accepts an absolute path, "..", a path starting with "../", or the
    name of a direct child of the current folder.
    """
    target = args.strip()
    tree = session.tree
    current = session.current_folder()

    if target.startswith('/'):
        folder = tree.resolve(target)
    elif target == '..':
        folder = tree.parent_of(current)
    elif target.startswith('../'):
        folder = _resolve_relative_parent(tree, current, target)
    else:
        folder = tree.get_child_by_name(current, target)

    # Names holding a slash are stored but cannot be reached by path
    if folder is None or tree.resolve(folder.full_path) is not folder:
        raise PathNotFoundError(args)

    session.cwd = folder.full_path


def cmd_mkdir(session, args: str):
    """Create one folder per space-separated name"""
    folder = session.current_folder()
    for name in args.split(' '):
        session.tree.add_folder(folder, name)


BUILTIN_COMMANDS = [
    ('ls', cmd_ls),
    ('cd', cmd_cd),
    ('mkdir', cmd_mkdir),
]


def default_registry() -> CommandRegistry:
    """Build a registry holding the built-in commands"""
    registry = CommandRegistry()
    for name, handler in BUILTIN_COMMANDS:
        registry.register(name, handler)
    return registry
