import pytest

from minish.text import (
    compare_prefix,
    is_printable,
    number_length,
    skip_spaces,
    skip_to,
    slice_input,
    split_commands,
    split_on,
    split_words,
    strip_lines,
)


@pytest.mark.parametrize("ch,expected", [("!", True), ("~", True), ("a", True),
                                         (" ", False), ("\t", False), ("\n", False)])
def test_is_printable(ch, expected):
    assert is_printable(ch) is expected


def test_skip_spaces_only_leading():
    assert skip_spaces(" \t ls ") == "ls "
    assert skip_spaces("ls") == "ls"


def test_split_words_basic():
    assert split_words("ls -l /tmp") == ["ls", "-l", "/tmp"]


def test_split_words_collapses_blank_runs():
    assert split_words("ls \t  -l") == ["ls", "-l"]


def test_split_words_leading_blank_gives_empty_word():
    assert split_words(" ls") == ["", "ls"]


def test_split_words_trailing_blanks_ignored():
    assert split_words("ls   ") == ["ls"]
    assert split_words("") == []


def test_split_words_newline_separates():
    assert split_words("ab\ncd") == ["ab", "cd"]


def test_split_words_join_round_trip():
    words = ["echo", "hello", "world"]
    assert split_words(" ".join(words)) == words


def test_split_on_path():
    assert split_on("/usr/bin:/bin", ":") == ["/usr/bin", "/bin"]


def test_split_on_keeps_inner_spaces_and_skips_leading():
    assert split_on("  a b:c", ":") == ["a b", "c"]


def test_split_on_empty_piece_and_trailing_delimiter():
    assert split_on("a::b", ":") == ["a", "", "b"]
    assert split_on("a:", ":") == ["a"]


def test_split_commands_semicolon():
    assert split_commands("ls -l; pwd", ";") == ["ls -l", " pwd"]


def test_split_commands_literal_backslash_n():
    assert split_commands("ls\\npwd", ";") == ["ls", "pwd"]


def test_split_commands_leading_and_trailing_delimiter():
    assert split_commands(";ls", ";") == ["", "ls"]
    assert split_commands("ls;", ";") == ["ls"]


def test_split_commands_pieces_come_from_input():
    line = "echo a;echo b;echo c"
    pieces = split_commands(line, ";")
    assert ";".join(pieces) == line


def test_slice_input_range():
    assert slice_input(0, 2, "ls|wc") == "ls"


def test_slice_input_to_end():
    assert slice_input(2, -1, "ls|wc") == "|wc"


@pytest.mark.parametrize("begin,end,text", [(3, 3, "ls|wc"), (2, 1, "ls|wc"),
                                            (2, 4, "ls wc"), (5, -1, "ls|wc")])
def test_slice_input_rejects(begin, end, text):
    assert slice_input(begin, end, text) is None


def test_skip_to():
    assert skip_to("NAME=value", "=") == "=value"
    assert skip_to("abc", "=") == ""
    assert skip_to("first\nsecond", "\n") == "second"


def test_compare_prefix_match():
    assert compare_prefix("PATH=/bin", "PATH", 4) == 0
    assert compare_prefix("same", "same", 10) == 0


def test_compare_prefix_sign():
    assert compare_prefix("abc", "abd", 3) > 0
    assert compare_prefix("abd", "abc", 3) < 0


def test_compare_prefix_zero_length_compares_heads():
    assert compare_prefix("b", "a", 0) > 0
    assert compare_prefix("", "", 5) == 0


def test_strip_lines():
    assert strip_lines(["one\ntwo", "three", ""]) == ["one", "three", ""]


@pytest.mark.parametrize("value", [1, 7, 42, 999, 123456])
def test_number_length_negative_adds_sign(value):
    assert number_length(-value) == number_length(value) + 1