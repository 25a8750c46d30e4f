"""
Channel-aware export: picks the right serialization for each content channel.
"""
from __future__ import annotations

from src.parsing.materials import ContentChannel, ParsedMaterial

from .serializer import outline_to_markdown, quiz_to_text, slides_to_markdown


def channel_export_text(
    material: ParsedMaterial, channel: ContentChannel | str, raw: str | None = None
) -> str:
    """
    Text to export for one channel.

    Outlines and slides are re-serialized from their parsed records. MCQs
    are exported from the raw channel text when it is available.
    """
    channel = ContentChannel(channel)
    if channel in (ContentChannel.OVERVIEW, ContentChannel.NOTES):
        return outline_to_markdown(material.records(channel))
    if channel is ContentChannel.SLIDES:
        return slides_to_markdown(material.slides)
    if raw is not None:
        return raw

    return quiz_to_text(material.mcqs)
