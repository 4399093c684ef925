"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import MagicMock

import pytest

from shellcommander.filesystem import FolderTree
from shellcommander.shell import ShellSession
from shellcommander.terminal import BufferedTerminal, Terminal


@pytest.fixture
def tree():
    """Folder tree with the default layout."""
    return FolderTree()


@pytest.fixture
def empty_tree():
    """Folder tree holding only the root."""
    return FolderTree(populate=False)


@pytest.fixture
def terminal():
    """Terminal that records output lines and the prompt."""
    return BufferedTerminal()


@pytest.fixture
def mock_terminal():
    """
    Create a mock terminal for asserting calls.

    Returns:
        MagicMock constrained to the Terminal interface
    """
    return MagicMock(spec=Terminal)


@pytest.fixture
def session(terminal, tree):
    """Fresh shell session over the default layout."""
    return ShellSession(terminal, tree=tree)


@pytest.fixture
def make_session():
    """Build a session over a root holding the given number of folders."""

    def _make(count):
        tree = FolderTree(populate=False)
        for i in range(count):
            tree.add_folder(tree.root, f"d{i}")
        return ShellSession(BufferedTerminal(), tree=tree)

    return _make
