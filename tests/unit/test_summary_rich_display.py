"""Tests for the rich summary display."""

import pytest
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from wordround.summary.choices import ChoiceClass, label_choice
from wordround.summary.display_state import (
    BreakdownEntryState,
    SummaryDisplayState,
    WordChip,
    build_breakdown_states,
    build_summary_state,
)
from wordround.summary.rich_display import (
    CHOICE_STYLES,
    MIN_WIDE_WIDTH,
    RichSummaryDisplay,
    format_choice_rich,
    format_word_chip,
)


def make_summary_state(terminal_width: int = 100, empty: bool = False) -> SummaryDisplayState:
    """Create a SummaryDisplayState for testing."""
    if empty:
        return SummaryDisplayState(
            title="Empty",
            num_correct_rounds=0,
            num_total_rounds=0,
            progress=None,
            never_missed=[],
            needs_work=[],
            terminal_width=terminal_width,
        )
    return SummaryDisplayState(
        title="Animals",
        num_correct_rounds=2,
        num_total_rounds=3,
        progress=2 / 3,
        never_missed=[WordChip(text="cat", color="green")],
        needs_work=[WordChip(text="dog", color="green"), WordChip(text="cow", color="blue")],
        terminal_width=terminal_width,
    )


def render_text(renderable, width: int = 100) -> str:
    console = Console(record=True, width=width, force_terminal=True)
    console.print(renderable)
    return console.export_text()


class TestFormatting:
    """Tests for formatting helpers."""

    def test_choice_styles(self):
        correct = format_choice_rich(label_choice("cat", "cat", []))
        wrong = format_choice_rich(label_choice("dog", "cat", ["dog"]))
        neutral = format_choice_rich(label_choice("cow", "cat", ["dog"]))

        assert isinstance(correct, Text)
        assert correct.plain == "cat"
        assert correct.style == CHOICE_STYLES[ChoiceClass.CORRECT]
        assert "underline" in str(correct.style)
        assert wrong.style == CHOICE_STYLES[ChoiceClass.INCORRECTLY_GUESSED]
        assert "red" in str(wrong.style)
        assert neutral.style == CHOICE_STYLES[ChoiceClass.NEUTRAL]

    def test_choice_truncated(self):
        text = format_choice_rich(label_choice("abcdefghijklmnop", "x", []))
        assert text.plain == "abcdefghijk…"

    def test_word_chip_uses_list_color(self):
        chip = format_word_chip(WordChip(text="cat", color="magenta"))
        assert chip.plain.strip() == "cat"
        assert "magenta" in str(chip.style)


class TestRenderSummary:
    """Tests for the summary screen."""

    def test_contains_expected_elements(self):
        display = RichSummaryDisplay()
        panel = display.render_summary(make_summary_state())
        output = render_text(panel)

        assert isinstance(panel, Panel)
        assert "Summary of Animals" in output
        assert "Correct:" in output
        assert "2/3 Rounds" in output
        assert "Never Missed" in output
        assert "Correct on 1st attempt" in output
        assert "Needs Work" in output
        assert "Incorrect on 1st attempt" in output
        assert "cat" in output and "dog" in output and "cow" in output
        assert "Play Round Again" in output
        assert "Round Breakdown" in output

    def test_empty_state(self):
        """No rounds shows a no-data note instead of a progress bar."""
        display = RichSummaryDisplay()
        output = render_text(display.render_summary(make_summary_state(empty=True)))

        assert "0/0 Rounds" in output
        assert "No rounds played" in output
        assert "(none)" in output

    def test_compact_layout(self):
        display = RichSummaryDisplay()
        state = make_summary_state(terminal_width=MIN_WIDE_WIDTH - 10)
        output = render_text(display.render_summary(state), width=MIN_WIDE_WIDTH - 10)

        assert "Never Missed" in output
        assert "Needs Work" in output
        # Stacked: needs-work heading comes on a later line than never-missed
        lines = output.splitlines()
        never = next(i for i, l in enumerate(lines) if "Never Missed" in l)
        needs = next(i for i, l in enumerate(lines) if "Needs Work" in l)
        assert needs > never

    def test_wide_layout_side_by_side(self):
        display = RichSummaryDisplay()
        output = render_text(display.render_summary(make_summary_state()), width=120)

        line = next(l for l in output.splitlines() if "Never Missed" in l)
        assert "Needs Work" in line


class TestRenderBreakdown:
    """Tests for the breakdown screen."""

    def test_entries_rendered(self, cat_dog_game):
        display = RichSummaryDisplay()
        entries = build_breakdown_states(cat_dog_game.summary())
        output = render_text(display.render_breakdown(entries))

        assert "Round Breakdown" in output
        assert "Round 1: Correct" in output
        assert "Round 2: Correct" in output
        assert "Answer Choices:" in output
        assert "Answered correct on 1st attempt" in output
        assert "Answered correct on 2nd attempt" in output
        assert "a-very-long…" in output

    def test_unsolved_entry(self):
        display = RichSummaryDisplay()
        entry = BreakdownEntryState(
            round_number=3,
            is_correct=False,
            choices=[label_choice("dog", "cat", ["dog"])],
            attempts_ordinal="",
        )
        output = render_text(display.render_breakdown([entry]))

        assert "Round 3: Incorrect" in output
        assert "Never answered correctly" in output

    def test_no_entries(self):
        display = RichSummaryDisplay()
        output = render_text(display.render_breakdown([]))
        assert "No rounds played" in output


class TestDisplayState:
    """Tests for display state builders."""

    def test_build_summary_state(self, cat_dog_game):
        state = build_summary_state(cat_dog_game.summary(), terminal_width=80)

        assert state.title == "Animals"
        assert state.num_correct_rounds == 2
        assert state.num_total_rounds == 2
        assert state.progress == 1.0
        assert [c.text for c in state.never_missed] == ["cat"]
        assert state.needs_work[0].color == "green"
        assert state.terminal_width == 80

    def test_build_breakdown_states(self, cat_dog_game):
        entries = build_breakdown_states(cat_dog_game.summary())

        assert [e.round_number for e in entries] == [1, 2]
        assert entries[1].attempts_ordinal == "2nd"
        assert [c.classification for c in entries[1].choices] == [
            ChoiceClass.INCORRECTLY_GUESSED,
            ChoiceClass.CORRECT,
            ChoiceClass.NEUTRAL,
        ]


class TestRichSummaryDisplayWidth:
    """Tests for the console width setting."""

    def test_fixed_width(self):
        assert RichSummaryDisplay(width=45).get_terminal_width() == 45
