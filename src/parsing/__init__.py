"""
Parsing: generated study material to structured records.

Modules:
- segmenter: block splitting per content kind
- patterns: line predicates and extractors
- mcq_parser: quiz questions -> QuizItem
- slide_parser: slide decks -> SlideUnit
- outline_parser: notes / overview -> OutlineSection
- materials: per-topic view across the four content channels

All parsers are pure functions of their input string and never raise on
malformed content; missing fields fall back to placeholders.
"""

from .materials import ContentChannel, ParsedMaterial, parse_channel
from .mcq_parser import parse_quiz_items
from .models import OutlineSection, QuizItem, SlideUnit
from .outline_parser import OutlineAccumulator, parse_outline
from .segmenter import ContentKind, segment, split_block_lines
from .slide_parser import parse_slide_units

__all__ = [
    # Parsers
    "parse_quiz_items",
    "parse_slide_units",
    "parse_outline",
    "parse_channel",
    # Records
    "QuizItem",
    "SlideUnit",
    "OutlineSection",
    "ParsedMaterial",
    "ContentChannel",
    # Segmentation
    "ContentKind",
    "segment",
    "split_block_lines",
    "OutlineAccumulator",
]
