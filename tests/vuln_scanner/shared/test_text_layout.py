from __future__ import annotations

from rich.cells import cell_len

from vuln_scanner.shared.text_layout import wrap_text


def test_short_text_is_returned_unchanged():
    text = "already  short"
    assert wrap_text(text, 40) == [text]


def test_text_exactly_at_width_fits():
    assert wrap_text("abcde fghij", 11) == ["abcde fghij"]


def test_greedy_wrap():
    assert wrap_text("the quick brown fox jumps over the lazy dog", 10) == [
        "the quick",
        "brown fox",
        "jumps over",
        "the lazy",
        "dog",
    ]


def test_long_word_is_not_split():
    lines = wrap_text("see https://example.com/a/very/long/path for details", 12)
    assert lines == ["see", "https://example.com/a/very/long/path", "for details"]


def test_empty_input_gives_one_empty_line():
    assert wrap_text("", 10) == [""]
    assert wrap_text("   \n  ", 3) == [""]


def test_short_text_with_newline_or_tab_is_collapsed():
    assert wrap_text("Line one\nline two", 40) == ["Line one line two"]
    assert wrap_text("a\tb", 40) == ["a b"]


def test_wide_characters_are_measured_in_cells():
    # Each CJK character takes two cells.
    lines = wrap_text("漢字 漢字 漢字", 9)
    assert lines == ["漢字 漢字", "漢字"]
    assert all(cell_len(line) <= 9 for line in lines)


def test_wrap_is_pure():
    text = "one two three four five six"
    assert wrap_text(text, 9) == wrap_text(text, 9)
