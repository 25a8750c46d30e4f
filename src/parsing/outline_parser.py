"""
Notes / overview outline parser.

A single pass over every line, folding it into an OutlineAccumulator whose
state is one of NO_SECTION, IN_SECTION or IN_SUBSECTION.

"## " opens a section, "### " opens a subsection under the current section
and any other non-heading line is appended to whichever is open. Only one
level of nesting is kept.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from functools import reduce
from typing import Iterable

from loguru import logger

from .models import OutlineSection
from .patterns import SECTION_PREFIX, SUBSECTION_PREFIX, is_heading, strip_bold
from .segmenter import ContentKind, segment


class OutlineScanState(str, Enum):
    NO_SECTION = "no_section"
    IN_SECTION = "in_section"
    IN_SUBSECTION = "in_subsection"


@dataclass(frozen=True)
class _OpenSection:
    heading: str
    body: str = ""
    children: tuple[OutlineSection, ...] = ()

    def append(self, text: str) -> _OpenSection:
        body = f"{self.body}\n{text}" if self.body else text
        return replace(self, body=body)


@dataclass(frozen=True)
class OutlineAccumulator:
    """
    Scan state threaded through the fold.

    Every step returns a new accumulator; nothing is mutated in place, so a
    partial line sequence can be fed in and inspected directly.
    """

    sections: tuple[OutlineSection, ...] = field(default_factory=tuple)
    section: _OpenSection | None = None
    subsection: _OpenSection | None = None

    @property
    def state(self) -> OutlineScanState:
        if self.subsection is not None:
            return OutlineScanState.IN_SUBSECTION
        if self.section is not None:
            return OutlineScanState.IN_SECTION
        return OutlineScanState.NO_SECTION

    def _close_subsection(self) -> OutlineAccumulator:
        if self.section is None or self.subsection is None:
            return replace(self, subsection=None)
        child = OutlineSection(
            id=f"subsection-{len(self.section.children)}",
            heading=self.subsection.heading,
            body_text=self.subsection.body,
        )
        section = replace(self.section, children=self.section.children + (child,))
        return replace(self, section=section, subsection=None)

    def _close_section(self) -> OutlineAccumulator:
        acc = self._close_subsection()
        if acc.section is None:
            return acc
        closed = OutlineSection(
            id=f"section-{len(acc.sections)}",
            heading=acc.section.heading,
            body_text=acc.section.body,
            child_sections=acc.section.children,
        )
        return replace(acc, sections=acc.sections + (closed,), section=None)

    def open_section(self, heading: str) -> OutlineAccumulator:
        return replace(self._close_section(), section=_OpenSection(heading=heading))

    def open_subsection(self, heading: str) -> OutlineAccumulator:
        if self.section is None:
            return self
        return replace(self._close_subsection(), subsection=_OpenSection(heading=heading))

    def append_text(self, text: str) -> OutlineAccumulator:
        if self.subsection is not None:
            return replace(self, subsection=self.subsection.append(text))
        if self.section is not None:
            return replace(self, section=self.section.append(text))
        return self

    def feed(self, line: str) -> OutlineAccumulator:
        """Fold one raw line into the accumulator."""
        line = line.strip()
        if line.startswith(SECTION_PREFIX):
            return self.open_section(_heading_text(line, SECTION_PREFIX))
        if line.startswith(SUBSECTION_PREFIX):
            return self.open_subsection(_heading_text(line, SUBSECTION_PREFIX))
        if line and not is_heading(line):
            return self.append_text(strip_bold(line))
        return self

    def finish(self) -> list[OutlineSection]:
        """Close whatever is still open and drop empty sections."""
        closed = self._close_section()
        return [section for section in closed.sections if section.is_displayable]


def _heading_text(line: str, prefix: str) -> str:
    return strip_bold(line[len(prefix):]).strip()


def scan_outline(
    lines: Iterable[str], acc: OutlineAccumulator | None = None
) -> OutlineAccumulator:
    return reduce(OutlineAccumulator.feed, lines, acc or OutlineAccumulator())


def parse_outline(raw: str) -> list[OutlineSection]:
    """
    Parse notes or overview markdown into a two-level outline.

    Args:
        raw: Notes or overview channel content

    Returns:
        Sections in source order that have a heading and either body text
        or subsections
    """
    acc = OutlineAccumulator()
    for block in segment(raw, ContentKind.NOTES):
        acc = scan_outline(block.split("\n"), acc)

    sections = acc.finish()
    logger.debug(f"Parsed {len(sections)} outline sections")
    return sections
