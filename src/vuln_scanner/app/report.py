from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from rich.cells import cell_len

from ..core.domain.enums import Severity
from ..core.domain.models import DependencyReport, VulnerabilityRecord
from ..shared.severity import map_score_to_severity
from ..shared.text_layout import wrap_text
from ..shared.utils import strip_duplicate_cve, suggested_fix, truncate

H_LINE = "─"
V_LINE = "│"
TOP_LEFT, TOP_RIGHT = "┌", "┐"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"
LEFT_JOINT, RIGHT_JOINT = "├", "┤"

FIELD_INDENT = "    "

# Palette attribute names applied to the score, by tier.
SEVERITY_EMPHASIS: dict[Severity, tuple[str, ...]] = {
    Severity.CRITICAL: ("red", "bold"),
    Severity.HIGH: ("red",),
    Severity.MEDIUM: ("yellow",),
    Severity.LOW: (),
}


@dataclass(frozen=True)
class Palette:
    """Escape sequences used by the renderer. The default instance is plain text."""

    red: str = ""
    yellow: str = ""
    cyan: str = ""
    bold: str = ""
    reset: str = ""
    hyperlinks: bool = False

    @classmethod
    def ansi(cls) -> "Palette":
        return cls(
            red="\033[31m",
            yellow="\033[33m",
            cyan="\033[36m",
            bold="\033[1m",
            reset="\033[0m",
            hyperlinks=True,
        )

    @classmethod
    def plain(cls) -> "Palette":
        return cls()

    def emphasis(self, severity: Severity) -> str:
        return "".join(getattr(self, name) for name in SEVERITY_EMPHASIS[severity])

    def style(self, text: str, codes: str) -> str:
        if not codes or not text:
            return text
        return f"{codes}{text}{self.reset}"

    def link(self, text: str, url: str) -> str:
        """Wrap `text` in an OSC-8 hyperlink to `url`."""
        if not self.hyperlinks or not url:
            return text
        return f"\033]8;;{url}\033\\{text}\033]8;;\033\\"


@dataclass(frozen=True)
class _Span:
    text: str
    codes: str = ""
    url: str = ""


def summarize(reports: Iterable[DependencyReport]) -> tuple[int, int]:
    """Return (affected dependency count, total vulnerability count)."""
    affected = 0
    total = 0
    for r in reports:
        if r.is_vulnerable:
            affected += 1
            total += len(r.vulnerabilities)
    return affected, total


def link_text(reference: str) -> str:
    return reference.split("?", 1)[0] or reference


class ReportRenderer:
    """Render component reports as fixed-width boxes followed by a summary.

    Each vulnerable dependency gets one box::

        ┌──────────────┐
        │ pkg:...      │
        ├──────────────┤
        │ • [CVE] ...  │
        │     Severity │
        ├──────────────┤
        │ • [CVE] ...  │
        └──────────────┘

    Every line is `width` cells wide unless a single word is wider than the
    interior, in which case that line overflows.
    """

    def __init__(self, palette: Palette | None = None, width: int = 96, description_limit: int = 80) -> None:
        self._palette = palette or Palette.plain()
        self._width = width
        self._inner = width - 4
        self._description_limit = description_limit

    def render(self, reports: Sequence[DependencyReport]) -> list[str]:
        lines: list[str] = []
        for report in reports:
            if report.is_vulnerable:
                lines.extend(self.render_box(report))
        lines.extend(self.render_summary(reports))
        return lines

    def render_box(self, report: DependencyReport) -> list[str]:
        p = self._palette
        lines = [self._rule(TOP_LEFT, TOP_RIGHT)]
        for text in wrap_text(report.coordinate, self._inner):
            lines.append(self._row([_Span(text, p.cyan)]))
        lines.append(self._rule(LEFT_JOINT, RIGHT_JOINT))
        for i, vuln in enumerate(report.vulnerabilities):
            if i > 0:
                lines.append(self._rule(LEFT_JOINT, RIGHT_JOINT))
            lines.extend(self._entry(vuln))
        lines.append(self._rule(BOTTOM_LEFT, BOTTOM_RIGHT))
        return lines

    def render_summary(self, reports: Sequence[DependencyReport]) -> list[str]:
        p = self._palette
        affected, total = summarize(reports)
        if total == 0:
            return [p.style("No known vulnerabilities found!", p.cyan)]
        return [
            "",
            f"{p.style('Summary:', p.bold)} {affected} dependencies affected, {total} vulnerabilities found.",
            "",
        ]

    def _entry(self, v: VulnerabilityRecord) -> list[str]:
        p = self._palette
        severity = map_score_to_severity(v.score)
        title = strip_duplicate_cve(v.title, v.cve)
        reference = v.reference.strip()
        display_id = " ".join(v.display_id.split())

        lines = self._wrapped(f"• [{display_id}] ", title, p.bold, p.bold)
        lines += self._wrapped(
            f"{FIELD_INDENT}Severity: ", f"{v.score:.1f} ({severity.value})", p.emphasis(severity)
        )
        lines += self._wrapped(
            f"{FIELD_INDENT}Description: ", truncate(" ".join(v.description.split()), self._description_limit)
        )
        if reference and p.hyperlinks:
            lines += self._wrapped(f"{FIELD_INDENT}Reference: ", link_text(reference), url=reference)
        elif reference:
            # Without a hyperlink target the full URL has to be visible.
            lines += self._wrapped(f"{FIELD_INDENT}Reference: ", reference)
        else:
            lines += self._wrapped(f"{FIELD_INDENT}Reference: ", "-")
        lines += self._wrapped(f"{FIELD_INDENT}Suggested Fix: ", suggested_fix(v.description))
        return lines

    def _wrapped(self, label: str, value: str, value_codes: str = "", label_codes: str | None = None, url: str = "") -> list[str]:
        """Lay out `label value`, wrapping the value under its own first column."""
        p = self._palette
        indent = label[: len(label) - len(label.lstrip())]
        label_spans = [_Span(indent), _Span(label.lstrip(), p.bold if label_codes is None else label_codes)]
        offset = cell_len(label)
        rows: list[str] = []
        for i, chunk in enumerate(wrap_text(value, max(1, self._inner - offset))):
            lead = label_spans if i == 0 else [_Span(" " * offset)]
            rows.append(self._row([*lead, _Span(chunk, value_codes, url)]))
        return rows

    def _rule(self, left: str, right: str) -> str:
        return f"{left}{H_LINE * (self._width - 2)}{right}"

    def _row(self, spans: Sequence[_Span]) -> str:
        p = self._palette
        visible = cell_len("".join(s.text for s in spans))
        styled = "".join(p.style(p.link(s.text, s.url), s.codes) for s in spans)
        padding = " " * max(0, self._inner - visible)
        return f"{V_LINE} {styled}{padding} {V_LINE}"
