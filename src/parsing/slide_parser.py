"""
Slide deck parser.

Each "---" or "## " delimited block becomes one SlideUnit. The "##" line
names the slide; bullets and plain lines accumulate, in order, into its
body.
"""
from __future__ import annotations

from enum import Enum

from loguru import logger

from .models import SlideUnit
from .patterns import (
    SLIDE_HEADING_PREFIX,
    is_bullet_line,
    is_heading,
    strip_bold,
    strip_bullet_marker,
    strip_heading_marks,
)
from .segmenter import ContentKind, segment, split_block_lines


class SlideLineRole(str, Enum):
    HEADING = "heading"
    BULLET = "bullet"
    TEXT = "text"
    SKIP = "skip"


def classify_slide_line(line: str) -> tuple[SlideLineRole, str]:
    """Return the role of a trimmed line together with its cleaned text."""
    if line.startswith(SLIDE_HEADING_PREFIX):
        return SlideLineRole.HEADING, strip_bold(strip_heading_marks(line))
    if is_bullet_line(line):
        return SlideLineRole.BULLET, strip_bold(strip_bullet_marker(line))
    if line and not is_heading(line):
        return SlideLineRole.TEXT, strip_bold(line)
    return SlideLineRole.SKIP, ""


def build_slide_unit(lines: list[str], index: int) -> SlideUnit:
    heading = f"Slide {index + 1}"
    body_lines: list[str] = []

    for line in lines:
        role, text = classify_slide_line(line)
        if role is SlideLineRole.HEADING:
            heading = text
        elif role in (SlideLineRole.BULLET, SlideLineRole.TEXT):
            body_lines.append(text)

    if not body_lines:
        body_lines = [f"Content for {heading}"]

    return SlideUnit(id=f"slide-{index}", heading=heading, body_lines=tuple(body_lines))


def parse_slide_units(raw: str) -> list[SlideUnit]:
    """
    Parse generated slide markdown into SlideUnit records.

    Args:
        raw: Slides channel content

    Returns:
        Slides in source order; empty for blank input
    """
    slides = [
        build_slide_unit(split_block_lines(block), index)
        for index, block in enumerate(segment(raw, ContentKind.SLIDE))
    ]
    logger.debug(f"Parsed {len(slides)} slides")
    return slides
