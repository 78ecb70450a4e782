"""The mutable state the shell carries from one command to the next."""

import os
from dataclasses import dataclass, field

from .environment import lookup

_EXIT_WORDS = ("exit", "EXIT")
_PREVIOUS_DIR_VARIABLE = "OLDPWD"


class ShellExit(Exception):
    """Raised to end the shell with the given status."""

    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


@dataclass
class ShellState:
    """The current command line, its words and the shell's status values."""

    words: list = field(default_factory=list)
    program_name: str = ""
    line: str = ""
    pid: int = field(default_factory=os.getpid)
    oldpwd: str | None = None
    ending: int = 0
    redirect: bool = False
    exit_status: int = 0

    @property
    def argument_count(self):
        """Number of words after the program name."""
        return len(self.words) - 1

    @classmethod
    def from_words(cls, words, env, line):
        """Build the state for a first command line."""
        words = list(words)
        previous_dir = lookup(env, _PREVIOUS_DIR_VARIABLE)
        return cls(
            words=words,
            program_name=words[0] if words else "",
            line=line if line is not None else "",
            oldpwd=previous_dir,
        )

    def update_words(self, words):
        """Make `words` the current command."""
        self.words = list(words)
        self.program_name = self.words[0] if self.words else ""

    def check_exit(self, line=None):
        """Raise ShellExit when the line is the exit command."""
        text = self.line if line is None else line
        if text in _EXIT_WORDS:
            self.ending = -1
            raise ShellExit(0)