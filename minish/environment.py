"""Environment lookups and the setenv / unsetenv builtins."""

import os
import string
import sys

from .text import compare_prefix, split_on, split_words

_UNSET_COMMANDS = ("unsetenv", "UNSETENV")
_SET_COMMANDS = ("setenv", "SETENV")
_NAME_CHARACTERS = frozenset(string.ascii_letters + string.digits)


class ShellError(Exception):
    """A user-facing shell error with the exit status it sets."""

    def __init__(self, message, status=1):
        super().__init__(message)
        self.message = message
        self.status = status


def lookup(env, name):
    """Return the value of `name` in a list of NAME=value entries, or None."""
    prefix = name + "="
    for entry in env:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None


def _program_path(directory, name):
    base = directory + "/"
    components = [part for part in base.split("/") if part]
    filename = name[1:] if name.startswith("/") else name
    if components:
        last = components[-1]
        if compare_prefix(last, filename, len(last)) == 0:
            rest = filename.lstrip("/").partition("/")[2]
            if rest:
                filename = rest
    return base + filename


def find_executable(env, name):
    """Search PATH for an executable `name`; None when there is none."""
    path = lookup(env, "PATH")
    if path is None:
        return None
    for directory in split_on(path, ":"):
        candidate = _program_path(directory, name)
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def validate_variable_name(command, name):
    """Raise ShellError unless `name` is a valid variable name."""
    if name[:1] in string.digits and name:
        raise ShellError(f"{command}: Variable name must begin with a letter.")
    if any(ch not in _NAME_CHARACTERS for ch in name):
        raise ShellError(
            f"{command}: Variable name must contain alphanumeric characters."
        )


def set_variable(env, words):
    """Return a new env with NAME=VALUE appended for `setenv NAME [VALUE]`.

    With no name or more than two arguments the env is returned unchanged.
    """
    if len(words) >= 2:
        validate_variable_name(words[0], words[1])
    if len(words) not in (2, 3):
        return list(env)
    value = words[2] if len(words) == 3 else ""
    return [*env, f"{words[1]}={value}"]


def unset_variable(env, words):
    """Return a new env without entries that start with the given name."""
    if len(words) < 2:
        return list(env)
    validate_variable_name(words[0], words[1])
    name = words[1]
    return [entry for entry in env if compare_prefix(name, entry, len(name)) != 0]


def apply_env_command(env, line, stream=None):
    """Run a setenv or unsetenv command line and return the resulting env.

    A bare setenv prints the environment to `stream`. Other commands leave
    the env as it is.
    """
    if line is None:
        return list(env)
    words = split_words(line)
    if not words:
        return list(env)
    command = words[0]
    if command in _UNSET_COMMANDS:
        return unset_variable(env, words)
    if command in _SET_COMMANDS:
        if len(words) == 1:
            out = stream if stream is not None else sys.stdout
            for entry in env:
                out.write(entry + "\n")
            return list(env)
        return set_variable(env, words)
    return list(env)