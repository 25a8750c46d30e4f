"""
Multiple choice question parser.

Turns generated quiz markdown into QuizItem records. Each block is scanned
line by line with a small state machine:

    SEEKING_PROMPT -> COLLECTING_OPTIONS -> ANSWERED -> COLLECTING_EXPLANATION -> DONE

Per line the first matching rule wins (skip label, prompt, option, answer,
explanation). The explanation is always the last field read: once it is
found the following lines are folded into it and the scan stops.

Missing fields never fail the parse; they fall back to the placeholders in
``models``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from .models import (
    DEFAULT_CORRECT_CHOICE,
    NO_EXPLANATION,
    PLACEHOLDER_CHOICES,
    PLACEHOLDER_PROMPT,
    QuizItem,
)
from .patterns import (
    is_answer_line,
    is_explanation_continuation,
    is_explanation_line,
    is_heading,
    is_option_line,
    is_prompt_candidate,
    is_question_label_line,
    normalize_correct_choice,
    strip_answer_label,
    strip_bold,
    strip_explanation_label,
    strip_heading_marks,
    strip_numbered_prefix,
    strip_question_label,
)
from .segmenter import ContentKind, segment, split_block_lines

PROMPT_MIN_LENGTH = 10
FALLBACK_PROMPT_MIN_LENGTH = 15
SHORT_PROMPT_LENGTH = 5


class QuizLineRole(str, Enum):
    """Role of a single line inside a quiz block."""

    SKIP = "skip"
    PROMPT = "prompt"
    OPTION = "option"
    ANSWER = "answer"
    EXPLANATION = "explanation"
    OTHER = "other"


class QuizScanState(str, Enum):
    """Progress of the per-block scan."""

    SEEKING_PROMPT = "seeking_prompt"
    COLLECTING_OPTIONS = "collecting_options"
    ANSWERED = "answered"
    COLLECTING_EXPLANATION = "collecting_explanation"
    DONE = "done"


@dataclass
class QuizFields:
    """Raw fields collected from one block before defaults are applied."""

    prompt: str | None = None
    choices: list[str] = field(default_factory=list)
    answer: str = ""
    explanation: str = ""
    state: QuizScanState = QuizScanState.SEEKING_PROMPT


def classify_quiz_line(line: str, prompt_found: bool) -> QuizLineRole:
    """Assign a role to one trimmed, non-blank line."""
    if is_heading(line) or is_question_label_line(line):
        return QuizLineRole.SKIP
    if not prompt_found and is_prompt_candidate(line, PROMPT_MIN_LENGTH):
        return QuizLineRole.PROMPT
    if is_option_line(line):
        return QuizLineRole.OPTION
    if is_answer_line(line):
        return QuizLineRole.ANSWER
    if is_explanation_line(line):
        return QuizLineRole.EXPLANATION
    return QuizLineRole.OTHER


def clean_prompt(line: str) -> str:
    return strip_numbered_prefix(strip_bold(line)).strip()


def clean_fallback_prompt(line: str) -> str:
    return strip_numbered_prefix(strip_heading_marks(strip_bold(line.strip())))


def scan_quiz_block(lines: list[str]) -> QuizFields:
    """Run the line scanner over one block."""
    fields = QuizFields()

    for line in lines:
        if fields.state is QuizScanState.COLLECTING_EXPLANATION:
            if is_explanation_continuation(line):
                fields.explanation = f"{fields.explanation} {strip_bold(line)}"
                continue
            fields.state = QuizScanState.DONE

        if fields.state is QuizScanState.DONE:
            break

        role = classify_quiz_line(line, prompt_found=fields.prompt is not None)

        if role is QuizLineRole.PROMPT:
            fields.prompt = clean_prompt(line)
            if fields.state is QuizScanState.SEEKING_PROMPT:
                fields.state = QuizScanState.COLLECTING_OPTIONS
        elif role is QuizLineRole.OPTION:
            fields.choices.append(line)
            if fields.state is QuizScanState.SEEKING_PROMPT:
                fields.state = QuizScanState.COLLECTING_OPTIONS
        elif role is QuizLineRole.ANSWER:
            fields.answer = strip_answer_label(line)
            fields.state = QuizScanState.ANSWERED
        elif role is QuizLineRole.EXPLANATION:
            fields.explanation = strip_explanation_label(line)
            fields.state = QuizScanState.COLLECTING_EXPLANATION

    if fields.state is QuizScanState.COLLECTING_EXPLANATION:
        fields.state = QuizScanState.DONE

    if fields.prompt is None or len(fields.prompt) < SHORT_PROMPT_LENGTH:
        fallback = find_fallback_prompt(lines)
        if fallback is not None:
            fields.prompt = fallback

    return fields


def find_fallback_prompt(lines: list[str]) -> str | None:
    """First cleaned line that is long enough to be a question."""
    for line in lines:
        cleaned = clean_fallback_prompt(line)
        if not is_prompt_candidate(cleaned, FALLBACK_PROMPT_MIN_LENGTH):
            continue
        # "Question 2: Which layer ..." keeps only the question itself
        prompt = strip_question_label(cleaned).strip()
        if prompt:
            return prompt
    return None


def build_quiz_item(fields: QuizFields, index: int) -> QuizItem:
    """Fold scanned fields into a QuizItem, substituting placeholders."""
    prompt = (fields.prompt or "").strip()
    if len(prompt) < SHORT_PROMPT_LENGTH:
        prompt = PLACEHOLDER_PROMPT

    return QuizItem(
        id=f"mcq-{index}",
        prompt_text=prompt,
        choices=tuple(fields.choices) if fields.choices else PLACEHOLDER_CHOICES,
        correct_choice=normalize_correct_choice(fields.answer, DEFAULT_CORRECT_CHOICE),
        rationale=fields.explanation.strip() or NO_EXPLANATION,
    )


def parse_quiz_items(raw: str) -> list[QuizItem]:
    """
    Parse generated quiz markdown into QuizItem records.

    Args:
        raw: MCQ channel content

    Returns:
        Items in source order; empty when no question blocks are found
    """
    items = []
    for index, block in enumerate(segment(raw, ContentKind.MCQ)):
        fields = scan_quiz_block(split_block_lines(block))
        item = build_quiz_item(fields, index)
        if len(item.prompt_text) > SHORT_PROMPT_LENGTH:
            items.append(item)

    logger.debug(f"Parsed {len(items)} quiz items")
    return items
