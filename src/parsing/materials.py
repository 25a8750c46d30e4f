"""
Parsed view of one topic's generated study material.

A generation payload carries up to four content channels. Overview and
notes are both outlines; slides and MCQs have their own parsers. Channels
that are missing or blank are simply not parsed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from loguru import logger

from .mcq_parser import parse_quiz_items
from .models import OutlineSection, QuizItem, SlideUnit
from .outline_parser import parse_outline
from .slide_parser import parse_slide_units


class ContentChannel(str, Enum):
    """Named content channels produced per topic by the content source."""

    OVERVIEW = "overview"
    NOTES = "notes"
    SLIDES = "slides"
    MCQS = "mcqs"


CHANNEL_PARSERS = {
    ContentChannel.OVERVIEW: parse_outline,
    ContentChannel.NOTES: parse_outline,
    ContentChannel.SLIDES: parse_slide_units,
    ContentChannel.MCQS: parse_quiz_items,
}


def parse_channel(channel: ContentChannel | str, raw: str | None) -> list:
    """Parse raw content for a single channel. None or blank gives []."""
    channel = ContentChannel(channel)
    if not raw:
        return []
    return CHANNEL_PARSERS[channel](raw)


@dataclass(frozen=True)
class ParsedMaterial:
    """All parsed channels for a topic."""

    topic: str = ""
    overview: tuple[OutlineSection, ...] = field(default_factory=tuple)
    notes: tuple[OutlineSection, ...] = field(default_factory=tuple)
    slides: tuple[SlideUnit, ...] = field(default_factory=tuple)
    mcqs: tuple[QuizItem, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ParsedMaterial:
        """
        Build from a generation payload or topic record.

        Args:
            payload: Mapping with optional "topic", "overview", "notes",
                "slides" and "mcqs" string fields

        Returns:
            ParsedMaterial with every present channel parsed
        """
        parsed = {
            channel.value: tuple(parse_channel(channel, _as_text(payload.get(channel.value))))
            for channel in ContentChannel
        }
        material = cls(topic=str(payload.get("topic") or ""), **parsed)
        logger.debug(
            f"Parsed material for '{material.topic}': "
            f"{', '.join(c.value for c in material.available_channels) or 'nothing to display'}"
        )
        return material

    def records(self, channel: ContentChannel | str) -> tuple:
        return getattr(self, ContentChannel(channel).value)

    @property
    def available_channels(self) -> list[ContentChannel]:
        """Channels with at least one record, in display order."""
        return [channel for channel in ContentChannel if self.records(channel)]

    @property
    def is_empty(self) -> bool:
        return not self.available_channels


def _as_text(value: Any) -> str:
    # The topics endpoint stores mcqs as a list of question blocks.
    if isinstance(value, (list, tuple)):
        return "\n\n---\n\n".join(str(item) for item in value)
    return str(value) if value else ""
