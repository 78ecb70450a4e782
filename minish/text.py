"""String helpers used by the shell: tokenising, slicing and comparing."""

import re
from itertools import zip_longest

_BLANKS = " \t"
_WORD_SEPARATOR = re.compile(r"[ \t]+|[^!-~ \t]")


def is_printable(ch):
    """Return True for a visible ASCII character ('!' to '~')."""
    return "!" <= ch <= "~"


def skip_spaces(word):
    """Drop leading spaces and tabs."""
    return word.lstrip(_BLANKS)


def _drop_trailing_empty(pieces):
    if pieces and pieces[-1] == "":
        pieces.pop()
    return pieces


def split_words(word):
    """Split a line into words.

    A run of spaces or tabs is one separator; any other invisible character
    separates on its own. Leading blanks give an empty first word and a
    separator at the very end gives no trailing word.
    """
    return _drop_trailing_empty(_WORD_SEPARATOR.split(word))


def split_on(word, delimiter):
    """Split on `delimiter` and on invisible characters, keeping spaces.

    Leading blanks are skipped first; a trailing empty piece is dropped.
    """
    pieces = [[]]
    for ch in skip_spaces(word):
        if ch == " " or (is_printable(ch) and ch != delimiter):
            pieces[-1].append(ch)
        else:
            pieces.append([])
    return _drop_trailing_empty(["".join(piece) for piece in pieces])


def _is_command_char(word, index, delimiter):
    ch = word[index]
    if ch == " ":
        return True
    return (
        is_printable(ch)
        and ch != delimiter
        and not word.startswith("\\n", index)
    )


def split_commands(word, delimiter):
    """Split a command line on `delimiter` and on a literal backslash-n.

    Spaces stay inside the pieces. After a piece ends, a backslash-n pair
    is consumed whole, following blanks are skipped, and one more character
    is passed over before the next piece starts.
    """
    word = skip_spaces(word)
    size = len(word)
    pieces = []
    index = 0
    while index < size:
        start = index
        while index < size and _is_command_char(word, index, delimiter):
            index += 1
        pieces.append(word[start:index])
        if word.startswith("\\n", index):
            index += 1
        while index < size and word[index] in _BLANKS:
            index += 1
        index += 1
    return pieces


def slice_input(begin, end, text):
    """Return text[begin:end], or text[begin:] when end is -1.

    Returns None when the range is empty or when the character at `begin`
    is not a visible one.
    """
    if text is None or not (begin < end or end == -1):
        return None
    if not 0 <= begin < len(text) or not is_printable(text[begin]):
        return None
    if end == -1:
        return text[begin:]
    return text[begin:end]


def skip_to(word, delimiter):
    """Return the rest of `word` from the first `delimiter` on.

    When that character is a newline it is skipped as well; when the
    delimiter is absent the result is empty.
    """
    position = word.find(delimiter)
    if position < 0:
        return ""
    rest = word[position:]
    if rest.startswith("\n"):
        rest = rest[1:]
    return rest


def compare_prefix(first, second, length):
    """Compare up to `length` characters; 0 means the prefixes match.

    A mismatch gives the code of the character in `second` minus the one in
    `first`. When nothing is compared (length not positive or both empty)
    the first characters are compared the other way round.
    """
    limit = min(length, max(len(first), len(second)))
    if limit <= 0:
        head_first = ord(first[0]) if first else 0
        head_second = ord(second[0]) if second else 0
        return head_first - head_second
    pairs = zip_longest(first[:limit], second[:limit], fillvalue="\0")
    for mine, theirs in pairs:
        if mine != theirs:
            return ord(theirs) - ord(mine)
    return 0


def strip_lines(lines):
    """Copy each string up to its first newline."""
    return [line.split("\n", 1)[0] for line in lines]


def number_length(n):
    """Count the width of `n` the way the shell's number printer does."""
    length = 0
    if n < 0:
        length += 1
        n = -n
    if n == 0:
        return 1
    while n > 1:
        length += 1
        n //= 10
    return length