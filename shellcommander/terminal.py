#!/usr/bin/env python3
"""
Terminal I/O - Line-based output device a shell session writes to
"""

from typing import List


class Terminal:
    """Interface every front end implements for a shell session"""

    def echo(self, line: str):
        """Write one output line"""
        raise NotImplementedError

    def set_prompt(self, prompt: str):
        """Replace the prompt shown before the next input line"""
        raise NotImplementedError


class BufferedTerminal(Terminal):
    """Collects output lines until a front end drains them"""

    def __init__(self, prompt: str = ''):
        self.prompt = prompt
        self.lines: List[str] = []

    def echo(self, line: str):
        self.lines.append(line)

    def set_prompt(self, prompt: str):
        self.prompt = prompt

    def drain(self) -> List[str]:
        """Return pending output lines and clear the buffer"""
        lines, self.lines = self.lines, []
        return lines
