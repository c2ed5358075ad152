from __future__ import annotations

import re

from rich.cells import cell_len

# Whitespace other than a plain space (newline, tab, ...) cannot stay inside one row.
_ROW_BREAKING_WS = re.compile(r"[^\S ]")


def wrap_text(text: str, width: int) -> list[str]:
    """Greedy word wrap measured in terminal cells.

    Single-row text that already fits is returned untouched. Anything else is
    split on whitespace, so newlines and tabs never reach the output. Words are
    never split: a word wider than `width` sits alone on its own line and
    overflows. Empty or blank input yields a single empty line.

    Examples:
        >>> wrap_text("fixed in 2.3.1", 40)
        ['fixed in 2.3.1']
        >>> wrap_text("aaa bbb ccc", 7)
        ['aaa bbb', 'ccc']
        >>> wrap_text("one\\ntwo", 40)
        ['one two']
        >>> wrap_text("", 10)
        ['']
    """
    if cell_len(text) <= width and not _ROW_BREAKING_WS.search(text):
        return [text]

    words = text.split()
    if not words:
        return [""]

    lines: list[str] = []
    current = words[0]
    current_len = cell_len(current)
    for word in words[1:]:
        word_len = cell_len(word)
        if current_len + 1 + word_len <= width:
            current = f"{current} {word}"
            current_len += 1 + word_len
        else:
            lines.append(current)
            current = word
            current_len = word_len
    lines.append(current)
    return lines
