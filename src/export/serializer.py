"""
Export serialization for parsed and raw study material.

Parsed outlines and slides are flattened back into markdown-like text.
The flattening is lossy: outline sections become "#" headings and their
subsections "##", and slides lose any second-level structure, so the output
is not fed back into the parsers.
"""
from __future__ import annotations

import html
import re
from enum import Enum
from pathlib import Path
from typing import Iterable

from loguru import logger

from src.parsing.models import OutlineSection, QuizItem, SlideUnit


class ExportFormat(str, Enum):
    TXT = "txt"
    MD = "md"
    HTML = "html"
    PDF = "pdf"


MIME_TYPES = {
    ExportFormat.TXT: "text/plain",
    ExportFormat.MD: "text/markdown",
    ExportFormat.HTML: "text/html",
    # pdf is rendered as html and left to the viewer to print
    ExportFormat.PDF: "text/html",
}

# anything that is not a word character, space, dot or hyphen, including path separators
UNSAFE_FILE_CHARS = re.compile(r"[^\w .-]")
DEFAULT_FILE_STEM = "study-material"

HTML_TEMPLATE = """<html>
  <head>
    <title>{title}</title>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 20px; }}
      h1, h2, h3 {{ color: #333; }}
      .content {{ white-space: pre-wrap; }}
    </style>
  </head>
  <body>
    <h1>{title}</h1>
    <div class="content">{content}</div>
  </body>
</html>
"""


# ========================================
# Record serialization
# ========================================


def outline_to_markdown(sections: Iterable[OutlineSection]) -> str:
    parts = []
    for section in sections:
        parts.append(f"# {section.heading}\n\n{section.body_text or ''}\n\n")
        for child in section.child_sections:
            parts.append(f"## {child.heading}\n\n{child.body_text}\n\n")
    return "".join(parts)


def slides_to_markdown(slides: Iterable[SlideUnit]) -> str:
    parts = []
    for number, slide in enumerate(slides, start=1):
        items = "\n".join(f"- {line}" for line in slide.body_lines)
        parts.append(f"# Slide {number}: {slide.heading}\n\n{items}\n\n")
    return "".join(parts)


def quiz_to_text(items: Iterable[QuizItem], show_answers: bool = True) -> str:
    """Plain-text rendering of parsed questions, numbered from 1."""
    parts = []
    for number, item in enumerate(items, start=1):
        lines = [f"{number}. {item.prompt_text}", *item.choices]
        if show_answers:
            lines.append(f"Correct Answer: {item.correct_choice}")
            lines.append(f"Explanation: {item.rationale}")
        parts.append("\n".join(lines))
    return "\n\n".join(parts) + ("\n" if parts else "")


# ========================================
# File formats
# ========================================


def render_export(content: str, file_name: str, fmt: ExportFormat | str) -> tuple[str, str]:
    """
    Wrap content for the requested format.

    Returns:
        (body, mime type). txt and md pass the content through untouched.
    """
    fmt = ExportFormat(fmt)
    if fmt in (ExportFormat.HTML, ExportFormat.PDF):
        body = HTML_TEMPLATE.format(title=html.escape(file_name), content=html.escape(content))
    else:
        body = content
    return body, MIME_TYPES[fmt]


def safe_file_stem(name: str | None) -> str:
    """
    Turn a topic or user supplied name into a single path component.

    Separators and other unsafe characters become "_" and leading dots are
    dropped, so the result can never leave the export directory.
    """
    stem = UNSAFE_FILE_CHARS.sub("_", name or "").strip().lstrip(".").strip()
    return stem or DEFAULT_FILE_STEM


def export_file_name(file_name: str, content_type: str, fmt: ExportFormat | str) -> str:
    fmt = ExportFormat(fmt)
    return f"{safe_file_stem(file_name)}_{content_type}.{fmt.value}"


def write_export(
    content: str,
    file_name: str,
    content_type: str,
    fmt: ExportFormat | str,
    output_dir: Path | str = ".",
) -> Path:
    """Render and write an export file, returning its path."""
    body, mime_type = render_export(content, file_name, fmt)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / export_file_name(file_name, content_type, fmt)
    path.write_text(body, encoding="utf-8")
    logger.info(f"Exported {content_type} as {mime_type} to {path}")
    return path
