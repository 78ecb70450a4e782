# minish

Building blocks for a small command shell. The package has three parts:

- `minish.text`, which splits command lines into words and pieces and
  compares and slices strings.
- `minish.environment`, which works on an environment held as a list of
  `NAME=value` strings. It provides the `setenv` and `unsetenv` builtins
  and searches `PATH`.
- `minish.state`, which holds the state a shell carries from one command
  line to the next and recognises the `exit` command.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Splitting command lines

```python
from minish.text import split_words, split_on, skip_spaces

split_words("ls  -l\tsrc")        # ['ls', '-l', 'src']
split_on("/usr/bin:/bin", ":")    # ['/usr/bin', '/bin']
skip_spaces("  \tpwd")            # 'pwd'
```

- `split_words(line)` treats a run of spaces or tabs as one separator. Any
  other invisible character is a separator by itself. Leading blanks give
  an empty first word. A separator at the very end gives no trailing word.
- `split_on(line, delimiter)` skips leading blanks. It then splits on the
  delimiter and on invisible characters and keeps spaces inside the pieces.
- `split_commands(line, delimiter)` splits a line such as one holding
  `;`-separated commands. It splits on the delimiter and on a literal
  backslash followed by `n`.
- `slice_input(begin, end, text)` returns `text[begin:end]`, or
  `text[begin:]` when `end` is `-1`. It returns `None` when the range is
  empty or when the character at `begin` is not visible.
- `skip_to(word, delimiter)` returns the rest of the string from the
  delimiter on.
- `compare_prefix(first, second, length)` returns `0` when the first
  `length` characters match.
- `strip_lines(lines)` cuts each string at its first newline.
- `number_length(n)` gives a number's printed width.

## Environment builtins

```python
from minish.environment import apply_env_command, lookup, ShellError

env = ["PATH=/usr/bin:/bin", "HOME=/home/user"]
env = apply_env_command(env, "setenv GREETING hello")
lookup(env, "GREETING")                     # 'hello'
env = apply_env_command(env, "unsetenv GREETING")

try:
    apply_env_command(env, "setenv 1ABC x")
except ShellError as error:
    print(error.message, error.status)
    # setenv: Variable name must begin with a letter. 1
```

`apply_env_command(env, line, stream=None)` accepts `setenv`, `SETENV`,
`unsetenv` and `UNSETENV`. It always returns a new list and never changes
the one it is given.

- A bare `setenv` writes each entry on its own line to `stream`, or to
  standard output when no stream is given.
- `setenv NAME [VALUE]` appends `NAME=VALUE`. `VALUE` may be left out and
  is then empty. With more than two arguments the env is returned
  unchanged.
- `unsetenv NAME` removes every entry that starts with `NAME`.
- Any other command leaves the env as it is.

A variable name must not begin with a digit and must hold only letters and
digits. When it breaks either rule, `ShellError` is raised with status 1.
`validate_variable_name(command, name)` performs this check on its own.
`set_variable(env, words)` and `unset_variable(env, words)` work on lines
that have already been split into words.

`find_executable(env, name)` looks through the directories in `PATH` for
an executable file called `name`. It returns the first path found, or
`None`.

## Shell state

```python
from minish.state import ShellState, ShellExit

state = ShellState.from_words(["ls", "-l"], env, "ls -l")
state.program_name          # 'ls'
state.argument_count        # 1
state.update_words(["pwd"])

try:
    state.check_exit("exit")
except ShellExit as stop:
    print(stop.status)      # 0
```

`ShellState.from_words` takes `oldpwd` from the env's `OLDPWD` entry.
`check_exit` raises `ShellExit(0)` when the line is `exit` or `EXIT`. It
checks the state's own `line` when no line is given.

## What the package does not do

The package has no command to run and no interactive prompt. It does not
start programs. It does not carry out `cd` and does not join commands
with `;`. It provides the tokenising, environment and state pieces that
such a shell is built from.

## Running the tests

```
pip install .[test]
pytest
```