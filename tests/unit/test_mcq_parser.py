"""
Unit tests for the multiple choice question parser.

Covers the line classifier rule table, the explanation-terminated scan,
the prompt fallback and the placeholder defaults.

Run: pytest tests/unit/test_mcq_parser.py -v
"""
import pytest

from src.parsing.mcq_parser import (
    QuizLineRole,
    QuizScanState,
    classify_quiz_line,
    parse_quiz_items,
    scan_quiz_block,
)
from src.parsing.models import (
    NO_EXPLANATION,
    PLACEHOLDER_CHOICES,
    PLACEHOLDER_PROMPT,
    QuizItem,
)


# ========================================
# Line classifier
# ========================================


class TestClassifyQuizLine:
    """First matching rule wins."""

    @pytest.mark.parametrize(
        "line",
        ["## Question 1", "# Quiz", "**Question 1:**", "Question: what is this?"],
    )
    def test_headers_and_question_labels_are_skipped(self, line):
        assert classify_quiz_line(line, prompt_found=False) is QuizLineRole.SKIP

    def test_first_long_line_is_prompt(self):
        line = "What does the transport layer do?"
        assert classify_quiz_line(line, prompt_found=False) is QuizLineRole.PROMPT

    def test_long_line_after_prompt_is_other(self):
        line = "Some additional context sentence."
        assert classify_quiz_line(line, prompt_found=True) is QuizLineRole.OTHER

    def test_short_line_is_not_prompt(self):
        assert classify_quiz_line("Why DNS?", prompt_found=False) is QuizLineRole.OTHER

    def test_option_line(self):
        assert classify_quiz_line("A) Physical layer", prompt_found=False) is QuizLineRole.OPTION

    @pytest.mark.parametrize("line", ["Correct Answer: B", "**Answer:** C"])
    def test_answer_line(self, line):
        assert classify_quiz_line(line, prompt_found=True) is QuizLineRole.ANSWER

    def test_explanation_line(self):
        line = "Explanation: layer 3 routes."
        assert classify_quiz_line(line, prompt_found=True) is QuizLineRole.EXPLANATION


# ========================================
# Block scan
# ========================================


class TestScanQuizBlock:

    def test_full_block(self):
        lines = [
            "1. **Which device forwards packets between networks?**",
            "A) Hub",
            "B) Switch",
            "C) Router",
            "D) Repeater",
            "Correct Answer: C) Router",
            "Explanation: Routers work at layer 3.",
        ]
        fields = scan_quiz_block(lines)
        assert fields.prompt == "Which device forwards packets between networks?"
        assert fields.choices == lines[1:5]
        assert fields.answer == "C) Router"
        assert fields.explanation == "Routers work at layer 3."
        assert fields.state is QuizScanState.DONE

    def test_explanation_consumes_following_lines(self):
        lines = [
            "What does ARP resolve to hardware addresses?",
            "Explanation: ARP maps IPv4 addresses",
            "to **MAC** addresses",
            "on the local segment.",
        ]
        fields = scan_quiz_block(lines)
        assert fields.explanation == "ARP maps IPv4 addresses to MAC addresses on the local segment."

    def test_explanation_stops_at_option_and_ends_scan(self):
        lines = [
            "What does ARP resolve to hardware addresses?",
            "Explanation: first part",
            "A) late option",
            "Correct Answer: D",
        ]
        fields = scan_quiz_block(lines)
        assert fields.explanation == "first part"
        assert fields.choices == []
        assert fields.answer == ""
        assert fields.state is QuizScanState.DONE

    def test_explanation_stops_at_question_mention(self):
        lines = [
            "What does ARP resolve to hardware addresses?",
            "Explanation: first part",
            "Next question is harder",
        ]
        assert scan_quiz_block(lines).explanation == "first part"

    def test_state_progression(self):
        assert scan_quiz_block([]).state is QuizScanState.SEEKING_PROMPT
        assert scan_quiz_block(["A) only an option"]).state is QuizScanState.COLLECTING_OPTIONS
        assert scan_quiz_block(["Answer: B"]).state is QuizScanState.ANSWERED

    def test_fallback_prompt_after_question_label(self):
        lines = ["**Question:** What is 2+2?", "A) 3", "B) 4"]
        assert scan_quiz_block(lines).prompt == "What is 2+2?"

    def test_fallback_prompt_from_header_line(self):
        lines = ["## Explain how subnetting divides networks", "A) x"]
        fields = scan_quiz_block(lines)
        assert fields.prompt == "Explain how subnetting divides networks"

    def test_short_prompt_is_replaced_by_fallback(self):
        lines = ["**1.   Hey**", "#### Describe the role of a default gateway"]
        assert scan_quiz_block(lines).prompt == "Describe the role of a default gateway"


# ========================================
# Entry point
# ========================================


class TestParseQuizItems:

    def test_question_answer_explanation_scenario(self):
        raw = (
            "**Question:** What is 2+2?\nA) 3\nB) 4\nC) 5\nD) 6\n"
            "Correct Answer: B\nExplanation: Basic arithmetic."
        )
        items = parse_quiz_items(raw)
        assert len(items) == 1
        item = items[0]
        assert item.id == "mcq-0"
        assert item.prompt_text == "What is 2+2?"
        assert item.choices == ("A) 3", "B) 4", "C) 5", "D) 6")
        assert item.correct_choice == "B"
        assert "Basic arithmetic." in item.rationale

    def test_question_without_options_gets_defaults(self):
        items = parse_quiz_items("What is the capital city of France?")
        assert len(items) == 1
        item = items[0]
        assert item.prompt_text == "What is the capital city of France?"
        assert item.choices == PLACEHOLDER_CHOICES
        assert [c[0] for c in item.choices] == ["A", "B", "C", "D"]
        assert item.correct_choice == "A"
        assert item.rationale == NO_EXPLANATION

    def test_unrecoverable_prompt_uses_placeholder(self):
        items = parse_quiz_items("Why?\nA) yes\nB) no")
        assert len(items) == 1
        assert items[0].prompt_text == PLACEHOLDER_PROMPT

    def test_sample_content(self, sample_mcq_content):
        items = parse_quiz_items(sample_mcq_content)
        assert [item.id for item in items] == ["mcq-0", "mcq-1", "mcq-2"]

        first, second, third = items
        assert first.prompt_text == "Which layer of the OSI model handles routing?"
        assert first.correct_choice == "C"
        assert first.rationale == "Routers operate at Layer 3. They forward packets between networks."
        assert len(first.choices) == 4

        assert second.prompt_text == "What does TCP guarantee that UDP does not?"
        assert second.correct_choice == "B"
        assert second.rationale == "TCP retransmits lost segments and reorders them."

        assert third.prompt_text == "Which protocol resolves IP addresses to MAC addresses?"
        assert third.correct_choice == "C"
        assert third.rationale == NO_EXPLANATION

    def test_order_preserved(self):
        raw = "What is alpha here?\n---\nWhat is beta here?\n---\nWhat is gamma here?"
        prompts = [item.prompt_text for item in parse_quiz_items(raw)]
        assert prompts == ["What is alpha here?", "What is beta here?", "What is gamma here?"]

    def test_commentary_only_gives_empty_list(self):
        assert parse_quiz_items("Here are some great questions for you.") == []

    def test_options_kept_raw_in_encounter_order(self):
        raw = "Which one is a transport protocol?\nC) TCP\nA) IP\nB) ARP"
        item = parse_quiz_items(raw)[0]
        assert item.choices == ("C) TCP", "A) IP", "B) ARP")

    def test_records_are_immutable(self):
        item = parse_quiz_items("What is the capital city of France?")[0]
        with pytest.raises(Exception):
            item.prompt_text = "changed"

    def test_five_character_prompt_is_filtered_out(self):
        """A recovered prompt of exactly five characters is not displayable."""
        assert parse_quiz_items("1. **Hello**") == []


class TestUnsupportedOptionStyles:
    """
    Option styles other than "A)"-"D)" are not recognised.

    These pin the current behaviour so a change to it is deliberate.
    """

    def test_dot_style_options_are_ignored(self):
        raw = "Which protocol is connectionless?\nA. TCP\nB. UDP\nAnswer: B"
        item = parse_quiz_items(raw)[0]
        assert item.choices == PLACEHOLDER_CHOICES
        assert item.correct_choice == "B"

    def test_lowercase_options_are_ignored(self):
        raw = "Which protocol is connectionless?\na) TCP\nb) UDP"
        assert parse_quiz_items(raw)[0].choices == PLACEHOLDER_CHOICES

    def test_parenthesised_letters_are_ignored(self):
        raw = "Which protocol is connectionless?\n(A) TCP\n(B) UDP"
        assert parse_quiz_items(raw)[0].choices == PLACEHOLDER_CHOICES


class TestQuizItemHelpers:

    def test_choice_text_and_letters(self):
        item = QuizItem(id="mcq-0", prompt_text="Pick one please", choices=("A) x", "B) y"))
        assert item.choice_letters == ("A", "B")
        assert item.choice_text(1) == "y"

    def test_is_correct(self):
        item = QuizItem(id="mcq-0", prompt_text="Pick one please", correct_choice="C")
        assert item.is_correct("C")
        assert item.is_correct("c")
        assert not item.is_correct("A")
        assert not item.is_correct("")

    def test_to_dict(self):
        item = parse_quiz_items("What is the capital city of France?")[0]
        data = item.to_dict()
        assert data["id"] == "mcq-0"
        assert data["choices"] == list(PLACEHOLDER_CHOICES)
