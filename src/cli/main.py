"""
Typer CLI for the studygen toolkit.

Commands:
    studygen parse FILE --kind mcqs        - Parse a generated file and show the records
    studygen quiz FILE                     - Take a parsed MCQ file as an interactive quiz
    studygen generate TOPIC --type all     - Generate material through the content service
    studygen export FILE --kind notes      - Export a generated file as txt/md/html/pdf
    studygen topics list                   - List stored topics
    studygen topics show ID                - Show a stored topic's parsed material
    studygen topics delete ID              - Delete a stored topic
    studygen topics export ID              - Server-side export of a stored topic

Usage:
    studygen --help
    studygen parse notes.md --kind notes --json
    studygen generate "TCP handshake" --type mcqs
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.tree import Tree

from config import get_settings
from src.content_source import ContentSourceClient, ContentSourceError, GenerationType
from src.export import ExportFormat, channel_export_text, export_file_name, write_export
from src.parsing import (
    ContentChannel,
    OutlineSection,
    ParsedMaterial,
    QuizItem,
    SlideUnit,
    parse_channel,
)

app = typer.Typer(
    help="studygen CLI: parse, review and export generated study material",
    no_args_is_help=True,
)
topics_app = typer.Typer(help="Stored topic commands", no_args_is_help=True)
app.add_typer(topics_app, name="topics")

console = Console()


# ========================================
# Rendering helpers
# ========================================


def _render_outline(sections: list[OutlineSection] | tuple[OutlineSection, ...], title: str) -> None:
    tree = Tree(f"[bold cyan]{title}[/bold cyan]")
    for section in sections:
        branch = tree.add(f"[bold]{escape(section.heading)}[/bold]")
        if section.body_text:
            branch.add(escape(section.body_text))
        for child in section.child_sections:
            sub = branch.add(f"[yellow]{escape(child.heading)}[/yellow]")
            if child.body_text:
                sub.add(escape(child.body_text))
    console.print(tree)


def _render_slides(slides: list[SlideUnit] | tuple[SlideUnit, ...]) -> None:
    for number, slide in enumerate(slides, start=1):
        body = "\n".join(f"• {escape(line)}" for line in slide.body_lines)
        title = f"{number}/{len(slides)}  {escape(slide.heading)}"
        console.print(Panel(body, title=title, expand=False))


def _render_quiz(items: list[QuizItem] | tuple[QuizItem, ...]) -> None:
    table = Table(title=f"Quiz ({len(items)} questions)", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question", style="cyan")
    table.add_column("Choices")
    table.add_column("Answer", justify="center", style="green")
    for number, item in enumerate(items, start=1):
        table.add_row(
            str(number),
            escape(item.prompt_text),
            escape("\n".join(item.choices)),
            escape(item.correct_choice),
        )
    console.print(table)


def _render_channel(channel: ContentChannel, records) -> None:
    if not records:
        console.print(f"[yellow]No {channel.value} content to display.[/yellow]")
        return
    if channel is ContentChannel.MCQS:
        _render_quiz(records)
    elif channel is ContentChannel.SLIDES:
        _render_slides(records)
    else:
        _render_outline(records, channel.value.title())


def _read_source(source: Path) -> str:
    if not source.exists():
        console.print(f"[red]Error: File not found: {escape(str(source))}[/red]")
        raise typer.Exit(code=1)
    return source.read_text(encoding="utf-8")


def _client() -> ContentSourceClient:
    return ContentSourceClient(**get_settings().get_content_api_config())


def _run(coro):
    """Run a content service call, turning its errors into a clean exit."""
    try:
        return asyncio.run(coro)
    except ContentSourceError as e:
        console.print(f"[red]{escape(e.user_message)}[/red]")
        raise typer.Exit(code=1)


# ========================================
# Local file commands
# ========================================


@app.command("parse")
def parse_file(
    source: Path = typer.Argument(..., help="File holding generated content"),
    kind: ContentChannel = typer.Option(ContentChannel.NOTES, "--kind", "-k", help="Content channel"),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON"),
):
    """Parse a generated file and display the structured records."""
    records = parse_channel(kind, _read_source(source))

    if as_json:
        typer.echo(json.dumps([record.to_dict() for record in records], indent=2))
        return

    _render_channel(kind, records)


@app.command("quiz")
def take_quiz(
    source: Path = typer.Argument(..., help="File holding generated MCQs"),
):
    """Work through a generated MCQ file one question at a time."""
    items = parse_channel(ContentChannel.MCQS, _read_source(source))
    if not items:
        console.print("[yellow]No questions found.[/yellow]")
        raise typer.Exit(code=1)

    score = 0
    for number, item in enumerate(items, start=1):
        console.print(f"\n[bold cyan]Question {number} of {len(items)}[/bold cyan]")
        console.print(escape(item.prompt_text))
        for index, letter in enumerate(item.choice_letters):
            console.print(f"  [bold]{letter}[/bold]) {escape(item.choice_text(index))}")

        pick = Prompt.ask("Your answer", choices=list(item.choice_letters), console=console)
        if item.is_correct(pick):
            score += 1
            console.print("[green]Correct![/green]")
        else:
            console.print(f"[red]Incorrect.[/red] The correct answer is {escape(item.correct_choice)}.")
        console.print(f"[dim]{escape(item.rationale)}[/dim]")

    console.print(f"\n[bold]Score: {score}/{len(items)}[/bold]")


@app.command("export")
def export_file(
    source: Path = typer.Argument(..., help="File holding generated content"),
    kind: ContentChannel = typer.Option(ContentChannel.NOTES, "--kind", "-k", help="Content channel"),
    fmt: Optional[ExportFormat] = typer.Option(None, "--format", "-f", help="Export format"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Base file name (defaults to source stem)"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output directory"),
):
    """Export a generated file, re-serialized from its parsed records."""
    settings = get_settings()
    raw = _read_source(source)
    material = ParsedMaterial.from_payload({kind.value: raw})

    path = write_export(
        channel_export_text(material, kind, raw=raw if kind is ContentChannel.MCQS else None),
        file_name=name or source.stem,
        content_type=kind.value,
        fmt=fmt or settings.default_export_format,
        output_dir=output_dir or settings.export_dir,
    )
    console.print(f"[green]Exported to {escape(str(path))}[/green]")


# ========================================
# Content service commands
# ========================================


@app.command("generate")
def generate(
    topic: str = typer.Argument(..., help="Topic to generate study material for"),
    content_type: GenerationType = typer.Option(GenerationType.ALL, "--type", "-t", help="What to generate"),
    as_json: bool = typer.Option(False, "--json", help="Print parsed records as JSON"),
    save_dir: Optional[Path] = typer.Option(None, "--save-dir", help="Also save raw channels as .md files"),
):
    """Generate study material and show every channel that parsed."""

    async def run():
        async with _client() as client:
            return await client.generate_study_material(topic, content_type)

    with console.status(f"Generating {content_type.value} for '{escape(topic)}'..."):
        content = _run(run())

    payload = content.to_payload()
    material = ParsedMaterial.from_payload({"topic": topic, **payload})

    if save_dir is not None:
        save_dir.mkdir(parents=True, exist_ok=True)
        for channel in material.available_channels:
            raw = payload[channel.value]
            if isinstance(raw, list):
                raw = "\n\n---\n\n".join(raw)
            (save_dir / f"{channel.value}.md").write_text(raw, encoding="utf-8")

    _show_material(material, as_json)


def _show_material(material: ParsedMaterial, as_json: bool) -> None:
    if as_json:
        typer.echo(
            json.dumps(
                {
                    channel.value: [record.to_dict() for record in material.records(channel)]
                    for channel in material.available_channels
                },
                indent=2,
            )
        )
        return

    if material.is_empty:
        console.print("[yellow]The service returned no content to display.[/yellow]")
        return

    for channel in material.available_channels:
        console.rule(channel.value.title())
        _render_channel(channel, material.records(channel))


@topics_app.command("list")
def list_topics():
    """List stored topics."""

    async def run():
        async with _client() as client:
            return await client.fetch_topics()

    topics = _run(run())
    if not topics:
        console.print("[yellow]No topics stored yet.[/yellow]")
        return

    table = Table(title="Topics", show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Topic", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Created", style="green")
    for topic in topics:
        table.add_row(
            escape(topic.id), escape(topic.topic), escape(topic.type.upper()), escape(topic.created_at or "")
        )
    console.print(table)


@topics_app.command("show")
def show_topic(
    topic_id: str = typer.Argument(..., help="Topic ID"),
    as_json: bool = typer.Option(False, "--json", help="Print parsed records as JSON"),
):
    """Fetch a stored topic and show its parsed material."""

    async def run():
        async with _client() as client:
            return await client.fetch_topic(topic_id)

    topic = _run(run())
    _show_material(ParsedMaterial.from_payload(topic.to_payload()), as_json)


@topics_app.command("delete")
def delete_topic(
    topic_id: str = typer.Argument(..., help="Topic ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a stored topic."""
    if not yes and not typer.confirm(f"Delete topic {topic_id}? This cannot be undone."):
        raise typer.Exit(code=0)

    async def run():
        async with _client() as client:
            return await client.delete_topic(topic_id)

    _run(run())
    console.print(f"[green]Deleted topic {escape(topic_id)}[/green]")


@topics_app.command("export")
def export_topic(
    topic_id: str = typer.Argument(..., help="Topic ID"),
    kind: ContentChannel = typer.Option(ContentChannel.OVERVIEW, "--kind", "-k", help="Content channel"),
    fmt: ExportFormat = typer.Option(ExportFormat.PDF, "--format", "-f", help="Export format"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output directory"),
):
    """Download a server-side export of a stored topic."""

    async def run():
        async with _client() as client:
            topic = await client.fetch_topic(topic_id)
            body = await client.export_topic(topic_id, fmt.value, kind.value)
            return topic, body

    topic, body = _run(run())

    output_dir = output_dir or Path(get_settings().export_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / export_file_name(topic.topic, kind.value, fmt)
    if isinstance(body, bytes):
        path.write_bytes(body)
    else:
        path.write_text(body, encoding="utf-8")
    console.print(f"[green]{kind.value} exported as {fmt.value.upper()} to {escape(str(path))}[/green]")


# ========================================
# Entry Point
# ========================================


def main() -> None:
    """CLI entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level,
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    main()
