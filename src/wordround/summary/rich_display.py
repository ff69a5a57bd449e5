"""Rich-based terminal display for the summary screens.

Takes SummaryDisplayState / BreakdownEntryState and renders them using
Rich's Panel, Text, Columns and ProgressBar components.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from wordround.summary.choices import ChoiceClass, ChoiceLabel

if TYPE_CHECKING:
    from wordround.summary.display_state import (
        BreakdownEntryState,
        SummaryDisplayState,
        WordChip,
    )

# Constants
CHOICE_STYLES = {
    ChoiceClass.CORRECT: "bold green underline",
    ChoiceClass.INCORRECTLY_GUESSED: "bold red",
    ChoiceClass.NEUTRAL: "bold",
}
CORRECT_COLOR = "green"
NEEDS_WORK_COLOR = "red"
MIN_WIDE_WIDTH = 60
PROGRESS_BAR_WIDTH = 40
FOOTER_ACTIONS = [("p", "Play Round Again"), ("b", "Round Breakdown"), ("h", "Home")]


def format_choice_rich(label: ChoiceLabel) -> Text:
    """Format an answer choice coloured by its classification.

    Args:
        label: Labelled choice

    Returns:
        Rich Text with the (possibly truncated) choice styled
    """
    return Text(label.display_text, style=CHOICE_STYLES[label.classification])


def format_word_chip(chip: "WordChip") -> Text:
    """Format a word as a coloured chip, using its word list colour."""
    return Text(f" {chip.text} ", style=f"bold white on {chip.color}")


class RichSummaryDisplay:
    """Rich-based renderer for the game summary and round breakdown."""

    def __init__(self, width: Optional[int] = None) -> None:
        """Initialize the display with a Rich Console.

        Args:
            width: Fixed console width, or None to follow the terminal
        """
        self.console = Console(width=width)

    def render_summary(self, state: "SummaryDisplayState") -> Panel:
        """Build the summary screen.

        Args:
            state: The SummaryDisplayState to render

        Returns:
            Rich Panel containing the complete layout
        """
        sections: list[RenderableType] = [self._build_correct_header(state)]

        never_missed = self._build_word_group(
            "Never Missed", "Correct on 1st attempt", state.never_missed, CORRECT_COLOR
        )
        needs_work = self._build_word_group(
            "Needs Work", "Incorrect on 1st attempt", state.needs_work, NEEDS_WORK_COLOR
        )
        if state.terminal_width < MIN_WIDE_WIDTH:
            sections.extend([never_missed, needs_work])
        else:
            sections.append(Columns([never_missed, needs_work], equal=True, expand=True))

        sections.append(self._build_footer())

        return Panel(
            Group(*sections),
            title=f"[bold]Summary of {state.title}[/bold]",
            border_style="dim cyan",
        )

    def render_breakdown(self, entries: list["BreakdownEntryState"]) -> Panel:
        """Build the round breakdown screen, one card per round.

        Args:
            entries: Breakdown entries in round order

        Returns:
            Rich Panel holding every round card
        """
        if not entries:
            body: RenderableType = Text("No rounds played", style="dim italic")
        else:
            body = Group(*(self._build_entry(entry) for entry in entries))

        return Panel(
            body,
            title="[bold]Round Breakdown[/bold]",
            border_style="dim cyan",
        )

    def get_terminal_width(self) -> int:
        return self.console.width

    def _build_correct_header(self, state: "SummaryDisplayState") -> Panel:
        """Correct count and progress bar, ignoring number of tries."""
        text = Text()
        text.append("Correct:", style=f"bold {CORRECT_COLOR}")
        text.append("\n")
        text.append(f"{state.num_correct_rounds}/{state.num_total_rounds} Rounds", style="bold")

        if state.progress is None:
            bar: RenderableType = Text("No rounds played", style="dim italic")
        else:
            bar = ProgressBar(
                total=state.num_total_rounds,
                completed=state.num_correct_rounds,
                width=PROGRESS_BAR_WIDTH,
                complete_style=CORRECT_COLOR,
                finished_style=CORRECT_COLOR,
            )

        return Panel(Group(text, bar), border_style="dim cyan")

    def _build_word_group(
        self,
        heading: str,
        subheading: str,
        chips: list["WordChip"],
        color: str,
    ) -> Panel:
        """Build a titled group of word chips."""
        text = Text()
        text.append(heading, style=f"bold {color}")
        text.append("\n")
        text.append(subheading, style="bold")
        text.append("\n")

        if not chips:
            text.append("(none)", style="dim italic")
        else:
            for i, chip in enumerate(chips):
                if i:
                    text.append(" ")
                text.append_text(format_word_chip(chip))

        return Panel(text, border_style="dim cyan")

    def _build_footer(self) -> Text:
        text = Text()
        for key, label in FOOTER_ACTIONS:
            text.append(f"[{key}]", style="bold green")
            text.append(f" {label}   ")
        return text

    def _build_entry(self, entry: "BreakdownEntryState") -> Panel:
        """Build one round card: result, choices, attempts."""
        text = Text()
        text.append(f"Round {entry.round_number}: ", style="bold")
        if entry.is_correct:
            text.append("Correct", style=f"bold {CORRECT_COLOR}")
        else:
            text.append("Incorrect", style=f"bold {NEEDS_WORK_COLOR}")
        text.append("\n")

        text.append("Answer Choices: ", style="bold")
        for i, label in enumerate(entry.choices):
            if i:
                text.append("  ")
            text.append_text(format_choice_rich(label))
        text.append("\n")

        if entry.attempts_ordinal:
            text.append("Answered correct on ", style="bold")
            text.append(entry.attempts_ordinal, style="bold underline")
            text.append(" attempt", style="bold")
        else:
            text.append("Never answered correctly", style="bold dim")

        return Panel(text, border_style="dim")


__all__ = [
    "RichSummaryDisplay",
    "format_choice_rich",
    "format_word_chip",
    "CHOICE_STYLES",
    "MIN_WIDE_WIDTH",
]
