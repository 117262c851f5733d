import pytest
from safeseq.functional.text import lines, lines_cr, words, unlines, unwords


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("\n", [""]),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\n\nb", ["a", "", "b"]),
        ("a\nb\n\n", ["a", "b", ""]),
        ("a\r\nb", ["a\r", "b"]),
        ("a\rb", ["a\rb"]),
    ],
)
def test_lines(text, expected):
    assert lines(text) == expected


def test_lines_cr_strips_carriage_returns():
    assert lines_cr("a\r\nb\nc\r\n") == ["a", "b", "c"]
    assert lines_cr("") == []
    assert lines_cr("\r\n") == [""]


def test_lines_cr_strips_only_one_trailing_cr():
    assert lines_cr("a\r\r\nb") == ["a\r", "b"]
    assert lines_cr("\ra\n") == ["\ra"]


def test_words_and_joins():
    assert words("  hello \t world\n") == ["hello", "world"]
    assert words("") == []
    assert unwords(["hello", "world"]) == "hello world"
    assert unlines(["a", "b"]) == "a\nb\n"
    assert unlines([]) == ""


def test_unlines_inverts_lines():
    text = "one\ntwo\n\nthree\n"
    assert unlines(lines(text)) == text
