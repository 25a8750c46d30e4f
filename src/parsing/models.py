"""
Typed records produced by the study material parsers.

Each record is built once per parse call and never mutated afterwards.
Ids are positional ("mcq-0", "slide-3", "section-1") and only stable within
a single parse of a single string.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .patterns import strip_option_prefix

PLACEHOLDER_PROMPT = "What is the main concept being tested in this question?"
PLACEHOLDER_CHOICES = ("A) Option A", "B) Option B", "C) Option C", "D) Option D")
DEFAULT_CORRECT_CHOICE = "A"
NO_EXPLANATION = "No explanation provided."


@dataclass(frozen=True)
class QuizItem:
    """A single multiple choice question."""

    id: str
    prompt_text: str
    choices: tuple[str, ...] = PLACEHOLDER_CHOICES
    correct_choice: str = DEFAULT_CORRECT_CHOICE
    rationale: str = NO_EXPLANATION

    @property
    def choice_letters(self) -> tuple[str, ...]:
        """Letters assigned to choices by position (A, B, C, ...)."""
        return tuple(chr(ord("A") + i) for i in range(len(self.choices)))

    def choice_text(self, index: int) -> str:
        """Choice text without its "X) " prefix, for display."""
        return strip_option_prefix(self.choices[index])

    def is_correct(self, letter: str) -> bool:
        """Check a learner's pick against the correct choice."""
        if not letter or not self.correct_choice:
            return False
        return letter.strip()[:1].upper() == self.correct_choice[0].upper()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "prompt_text": self.prompt_text,
            "choices": list(self.choices),
            "correct_choice": self.correct_choice,
            "rationale": self.rationale,
        }


@dataclass(frozen=True)
class SlideUnit:
    """One slide: a heading and its ordered content lines."""

    id: str
    heading: str
    body_lines: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "heading": self.heading,
            "body_lines": list(self.body_lines),
        }


@dataclass(frozen=True)
class OutlineSection:
    """
    A notes/overview section.

    Children are one level deep only: a child section never has children
    of its own.
    """

    id: str
    heading: str
    body_text: str = ""
    child_sections: tuple[OutlineSection, ...] = field(default_factory=tuple)

    @property
    def is_displayable(self) -> bool:
        """A section is kept when it has a heading and something under it."""
        return bool(self.heading) and (bool(self.body_text) or len(self.child_sections) > 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "heading": self.heading,
            "body_text": self.body_text,
            "child_sections": [child.to_dict() for child in self.child_sections],
        }
