"""
Where to insert new header pragmas.

New pragmas go after the shebang line(s), the last OPTIONS_GHC block and the
last LANGUAGE block, whichever ends lowest in the file.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from lsprotocol.types import Position, Range

from pragmals.utils.text import split_lines

PRAGMA_OPEN = "{-#"


def next_pragma_position(contents: str | None) -> Range:
    """
    Zero-width range on the first line after the file header pragmas.

    Defaults to line 0 if the contents are unknown, or the file has no
    shebang, OPTIONS_GHC pragma or LANGUAGE pragma.
    """
    line = 0 if contents is None else next_pragma_line(contents)
    position = Position(line=line, character=0)
    return Range(start=position, end=position)


def next_pragma_line(contents: str) -> int:
    lines = split_lines(contents)
    line = last_line_with(lambda text: text.startswith("#!"), lines, 0)
    # The order of shebangs, OPTIONS_GHC and LANGUAGE in the header varies,
    # so take the furthest of the three.
    line = after_pragma("OPTIONS_GHC", lines, line)
    line = after_pragma("LANGUAGE", lines, line)
    return line


def after_pragma(name: str, lines: Sequence[str], line: int) -> int:
    return last_line_with_multi(lambda text: is_pragma(name, text), lines, line)


def last_line_with(
    predicate: Callable[[str], bool], lines: Sequence[str], line: int
) -> int:
    """One past the last line matching ``predicate``, at least ``line``."""
    index = _last_index(predicate, lines)
    if index is None:
        return line
    return max(line, index + 1)


def last_line_with_multi(
    predicate: Callable[[str], bool], lines: Sequence[str], line: int
) -> int:
    """
    Like ``last_line_with`` but follows a pragma spanning several lines.

    The block starting at the last matching line ends on the first line
    closing the pragma (``#-}``).
    """
    index = _last_index(predicate, lines)
    if index is None:
        return max(line, 0)
    return max(line, end_of_pragma_block(index, lines[index:]))


def end_of_pragma_block(start: int, lines: Sequence[str]) -> int:
    """
    Line number following the pragma block that begins at ``start``.

    ``lines`` holds the file from the block's first line on. An unterminated
    block runs to the end of the file.
    """
    position = start
    for text in lines:
        position += 1
        if closes_block(text):
            break
    return position


def closes_block(text: str) -> bool:
    """True if the line ends in ``-}`` with nothing after the brace."""
    dash = text.find("-")
    if dash < 0:
        return False
    brace = text.find("}", dash)
    return brace >= 0 and text[brace:] == "}"


def is_pragma(name: str, text: str) -> bool:
    """``{-# NAME`` with optional whitespace between the opener and the name."""
    if not text.startswith(PRAGMA_OPEN):
        return False
    return text[len(PRAGMA_OPEN):].lstrip().startswith(name)


def _last_index(predicate: Callable[[str], bool], lines: Sequence[str]) -> int | None:
    for index in range(len(lines) - 1, -1, -1):
        if predicate(lines[index]):
            return index
    return None
