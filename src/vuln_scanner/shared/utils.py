from __future__ import annotations

import re
from typing import Optional


# Tried in this order; the first phrase followed by a token wins, even when a
# later phrase occurs earlier in the text.
UPGRADE_HINT_PHRASES = (
    "upgrade to version ",
    "upgrade to ",
    "fixed in ",
    "update to version ",
    "use version ",
)

FALLBACK_FIX = "Check latest version at reference URL."


def extract_upgrade_hint(description: str) -> Optional[str]:
    """Derive an upgrade suggestion from free-text advisory prose.

    Examples:
        >>> extract_upgrade_hint("Issue fixed in 2.3.1 after review")
        'Upgrade to version 2.3.1'
        >>> extract_upgrade_hint("No fix yet") is None
        True
    """
    lowered = description.lower()
    for phrase in UPGRADE_HINT_PHRASES:
        idx = lowered.find(phrase)
        if idx == -1:
            continue
        words = lowered[idx + len(phrase):].split()
        if not words:
            continue
        return f"Upgrade to version {words[0]}"
    return None


def suggested_fix(description: str) -> str:
    return extract_upgrade_hint(description) or FALLBACK_FIX


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def strip_duplicate_cve(title: str, cve: Optional[str]) -> str:
    """Remove a CVE id the title repeats, e.g. "[CVE-2021-1] Foo" -> "Foo"."""
    if not cve or cve.lower() not in title.lower():
        return title
    pattern = re.compile(r"[\[(]?\s*" + re.escape(cve) + r"\s*[\])]?\s*[:\-]?", re.IGNORECASE)
    stripped = " ".join(pattern.sub(" ", title).split())
    return stripped or title
