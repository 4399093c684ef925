#!/usr/bin/env python3
"""
Shell Errors - Failures reported back to the terminal user
"""


class ShellError(Exception):
    """Base class for errors a command reports instead of output"""


class PathNotFoundError(ShellError):
    """Raised when a path does not resolve to an existing folder"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Directory "{path}" does not exist.')
