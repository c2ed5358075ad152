from __future__ import annotations

import pytest

from vuln_scanner.shared.utils import (
    FALLBACK_FIX,
    extract_upgrade_hint,
    strip_duplicate_cve,
    suggested_fix,
    truncate,
)


def test_fixed_in_phrase():
    assert extract_upgrade_hint("The flaw was fixed in 2.3.1 after a report.") == "Upgrade to version 2.3.1"


@pytest.mark.parametrize("description, expected", [
    ("Users should Upgrade to version 1.2.3 immediately", "Upgrade to version 1.2.3"),
    ("Upgrade to 4.0.0 or later", "Upgrade to version 4.0.0"),
    ("Please update to version 5.1", "Upgrade to version 5.1"),
    ("Workaround: use version 0.9.9", "Upgrade to version 0.9.9"),
    ("Patched; fixed in 3.3.3.", "Upgrade to version 3.3.3."),
])
def test_each_phrase(description, expected):
    assert extract_upgrade_hint(description) == expected


def test_phrase_priority_beats_text_position():
    # "fixed in" appears first in the text but "upgrade to " has higher priority.
    description = "Fixed in 1.0.1 for the 1.x line; upgrade to 2.0.5 otherwise."
    assert extract_upgrade_hint(description) == "Upgrade to version 2.0.5"


def test_phrase_at_end_falls_through_to_next_phrase():
    assert extract_upgrade_hint("fixed in 7.7 - you must upgrade to ") == "Upgrade to version 7.7"


def test_no_phrase_gives_none_and_fallback():
    assert extract_upgrade_hint("A denial of service issue.") is None
    assert suggested_fix("A denial of service issue.") == FALLBACK_FIX


def test_truncate():
    assert truncate("abc", 3) == "abc"
    assert truncate("abcdef", 3) == "abc..."


@pytest.mark.parametrize("title, expected", [
    ("[CVE-2021-44228] Improper Input Validation", "Improper Input Validation"),
    ("CVE-2021-44228: Improper Input Validation", "Improper Input Validation"),
    ("Improper Input Validation", "Improper Input Validation"),
    ("[CVE-2021-44228]", "[CVE-2021-44228]"),
])
def test_strip_duplicate_cve(title, expected):
    assert strip_duplicate_cve(title, "CVE-2021-44228") == expected


def test_strip_duplicate_cve_without_cve():
    assert strip_duplicate_cve("[CVE-2021-1] Foo", None) == "[CVE-2021-1] Foo"
