"""
Line-level pattern primitives shared by the study material parsers.

Small predicates and extractors for the markdown-ish conventions that
generative models use in quiz, slide and notes output: bold markers,
heading hashes, numbered prefixes, bullet markers, option letters and the
answer/explanation labels.

Option detection only recognises "A)" through "D)". Variants such as "A.",
"(A)" or "a)" are not treated as options.
"""
from __future__ import annotations

import re

BOLD_MARKER = "**"

HEADING_MARKS_PATTERN = re.compile(r"^#+\s*")
NUMBERED_PREFIX_PATTERN = re.compile(r"^\d+\.\s*")
BULLET_MARKER_PATTERN = re.compile(r"^[-*•]\s*")
BULLET_PREFIXES = ("-", "*", "•")

OPTION_PATTERN = re.compile(r"^[A-D]\)")
OPTION_PREFIX_PATTERN = re.compile(r"^[A-D]\)\s*")
OPTION_LETTER_PATTERN = re.compile(r"[A-D]\)")
BARE_LETTER_PATTERN = re.compile(r"[A-D]")

QUESTION_LABEL_PATTERN = re.compile(r"^question\s*\d*\s*[:.]\s*", re.IGNORECASE)
ANSWER_LABEL_PATTERN = re.compile(
    r"\*\*Correct Answer:\*\*|\*\*Correct Answer\*\*|Correct Answer:?|Answer:",
    re.IGNORECASE,
)
EXPLANATION_LABEL_PATTERN = re.compile(
    r"\*\*Explanation:\*\*|\*\*Explanation\*\*|Explanation:?",
    re.IGNORECASE,
)

SECTION_PREFIX = "## "
SUBSECTION_PREFIX = "### "
SLIDE_HEADING_PREFIX = "##"
HEADING_PREFIX = "#"


# ========================================
# Cleanup extractors
# ========================================


def strip_bold(text: str) -> str:
    return text.replace(BOLD_MARKER, "")


def strip_heading_marks(text: str) -> str:
    return HEADING_MARKS_PATTERN.sub("", text, count=1)


def strip_numbered_prefix(text: str) -> str:
    return NUMBERED_PREFIX_PATTERN.sub("", text, count=1)


def strip_bullet_marker(text: str) -> str:
    return BULLET_MARKER_PATTERN.sub("", text, count=1)


def strip_option_prefix(text: str) -> str:
    return OPTION_PREFIX_PATTERN.sub("", text, count=1)


def strip_question_label(text: str) -> str:
    """Remove a leading "Question:" / "Question 3:" label."""
    return QUESTION_LABEL_PATTERN.sub("", text, count=1)


def strip_answer_label(text: str) -> str:
    """Remove every correct-answer label and any bold markers."""
    return strip_bold(ANSWER_LABEL_PATTERN.sub("", text)).strip()


def strip_explanation_label(text: str) -> str:
    """Remove every explanation label, bold markers and a dangling colon."""
    cleaned = strip_bold(EXPLANATION_LABEL_PATTERN.sub("", text)).strip()
    return cleaned.lstrip(":").strip()


# ========================================
# Predicates
# ========================================


def mentions(text: str, word: str) -> bool:
    """Case-insensitive substring check."""
    return word.lower() in text.lower()


def is_heading(text: str) -> bool:
    return text.startswith(HEADING_PREFIX)


def is_option_line(text: str) -> bool:
    return OPTION_PATTERN.match(text) is not None


def is_bullet_line(text: str) -> bool:
    return text.startswith(BULLET_PREFIXES)


def is_question_label_line(text: str) -> bool:
    """A "Question 1:" style label line, which carries no prompt of its own."""
    return mentions(text, "question") and ":" in text


def is_answer_line(text: str) -> bool:
    return mentions(text, "correct answer") or mentions(text, "answer:")


def is_explanation_line(text: str) -> bool:
    return mentions(text, "explanation")


def is_prompt_candidate(text: str, min_length: int) -> bool:
    """Long enough, and not an option, answer or explanation line."""
    return (
        len(text) > min_length
        and not is_option_line(text)
        and not mentions(text, "answer")
        and not mentions(text, "explanation")
    )


def is_explanation_continuation(text: str) -> bool:
    return bool(text) and not mentions(text, "question") and not is_option_line(text)


# ========================================
# Correct choice normalization
# ========================================


def normalize_correct_choice(raw: str, default: str = "A") -> str:
    """
    Reduce captured answer text to a single letter.

    "B) 4" -> "B", "The answer is C" -> "C", "b" -> "B".
    Anything unrecoverable falls back to ``default``.
    """
    raw = raw.strip()
    if not raw:
        return default

    if ")" in raw:
        match = OPTION_LETTER_PATTERN.search(raw)
        return match.group(0)[0] if match else default

    if len(raw) > 1:
        match = BARE_LETTER_PATTERN.search(raw)
        return match.group(0) if match else default

    letter = raw.upper()
    return letter if letter in "ABCD" else default
