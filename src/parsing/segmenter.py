"""
Block segmentation for generated study material.

Splits a raw generation result into candidate blocks, one per quiz question
or slide. Notes are not block based: the outline parser scans all lines in
a single pass, so a notes input comes back as one block.
"""
from __future__ import annotations

import re
from enum import Enum

from loguru import logger


class ContentKind(str, Enum):
    """Kind of generated content being segmented."""

    MCQ = "mcq"
    SLIDE = "slide"
    NOTES = "notes"


# "---" rule, or a blank line before a "##" header, a bolded "Question"
# marker or a numbered list item.
MCQ_SEPARATOR_PATTERN = re.compile(r"---+|\n\n(?=##)|\n\n(?=\*\*Question)|\n\n(?=\d+\.)")
MCQ_NUMBERED_START_PATTERN = re.compile(r"\d+\.")

# "---" rule, or the start of any "## " line (the header opens its own block).
SLIDE_SEPARATOR_PATTERN = re.compile(r"---+|(?=^##\s)", re.MULTILINE)


def split_block_lines(block: str) -> list[str]:
    """Split a block on newline characters only, trimming each line and dropping blanks."""
    return [line.strip() for line in block.split("\n") if line.strip()]


def _looks_like_question(block: str) -> bool:
    return (
        "Question" in block
        or "**Question" in block
        or MCQ_NUMBERED_START_PATTERN.match(block) is not None
        or "?" in block
    )


def segment_mcq(raw: str) -> list[str]:
    blocks = MCQ_SEPARATOR_PATTERN.split(raw)
    return [block for block in blocks if block.strip() and _looks_like_question(block)]


def segment_slides(raw: str) -> list[str]:
    blocks = SLIDE_SEPARATOR_PATTERN.split(raw)
    return [block for block in blocks if block.strip()]


def segment(raw: str, kind: ContentKind) -> list[str]:
    """
    Split raw content into ordered candidate blocks.

    Args:
        raw: Generated content as returned by the content source
        kind: Which separator rules to apply

    Returns:
        Blocks in source order. Empty when the input holds nothing usable.
    """
    if not raw or not raw.strip():
        return []

    kind = ContentKind(kind)
    if kind is ContentKind.MCQ:
        blocks = segment_mcq(raw)
    elif kind is ContentKind.SLIDE:
        blocks = segment_slides(raw)
    else:
        blocks = [raw]

    logger.debug(f"Segmented {kind.value} content into {len(blocks)} blocks")
    return blocks
