"""
Export: re-serialize study material for download.
"""

from .channels import channel_export_text
from .serializer import (
    ExportFormat,
    export_file_name,
    outline_to_markdown,
    quiz_to_text,
    render_export,
    safe_file_stem,
    slides_to_markdown,
    write_export,
)

__all__ = [
    "channel_export_text",
    "ExportFormat",
    "export_file_name",
    "outline_to_markdown",
    "quiz_to_text",
    "render_export",
    "safe_file_stem",
    "slides_to_markdown",
    "write_export",
]
