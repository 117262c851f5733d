"""Line and word splitting for strings.

``lines`` breaks only on ``"\\n"``. Unlike :meth:`str.splitlines` it does not
treat ``"\\r"``, form feeds or other separators as line breaks, so text read
with Windows line endings keeps a trailing ``"\\r"`` on every line. Use
``lines_cr`` to remove it.
"""

import typing as tp

from safeseq.functional.affixes import drop_suffix

__all__ = [
    "lines",
    "lines_cr",
    "words",
    "unlines",
    "unwords",
]


def lines(text: str) -> tp.List[str]:
    """Split ``text`` at newline characters.

    Newlines are not kept and a final newline does not produce an extra
    empty line: ``lines("a\\n\\nb\\n") == ["a", "", "b"]``.
    """
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return parts


def lines_cr(text: str) -> tp.List[str]:
    """Like ``lines``, but also drop one trailing ``"\\r"`` from each line.

    >>> lines_cr("a\\r\\nb\\nc\\r\\n")
    ['a', 'b', 'c']
    """
    return [drop_suffix("\r", line) for line in lines(text)]


def words(text: str) -> tp.List[str]:
    """Split ``text`` into words separated by runs of whitespace."""
    return text.split()


def unlines(items: tp.Iterable[str]) -> str:
    """Join lines, appending a newline after each one."""
    return "".join(f"{line}\n" for line in items)


def unwords(items: tp.Iterable[str]) -> str:
    """Join words with single spaces."""
    return " ".join(items)
