"""Plain-text display for the summary screens."""

from __future__ import annotations

from wordround.summary.choices import ChoiceClass, ChoiceLabel, accessibility_label
from wordround.summary.display_state import BreakdownEntryState, SummaryDisplayState

CHOICE_MARKERS = {
    ChoiceClass.CORRECT: "+",
    ChoiceClass.INCORRECTLY_GUESSED: "x",
    ChoiceClass.NEUTRAL: "-",
}


def format_choice(label: ChoiceLabel) -> str:
    """Format choice with its classification marker."""
    return f"{CHOICE_MARKERS[label.classification]}{label.display_text}"


class PlainSummaryRenderer:
    """Renders the summary screens as plain text."""

    def render_summary(self, state: SummaryDisplayState) -> str:
        lines: list[str] = []

        # Header
        lines.append(f"=== Summary of {state.title} ===")
        lines.append("")
        lines.append("Correct:")
        lines.append(f"{state.num_correct_rounds}/{state.num_total_rounds} Rounds")
        if state.progress is None:
            lines.append("No rounds played")
        else:
            lines.append(f"{state.progress * 100:.0f}% correct")
        lines.append("")

        # Word groups
        for heading, subheading, chips in (
            ("Never Missed", "Correct on 1st attempt", state.never_missed),
            ("Needs Work", "Incorrect on 1st attempt", state.needs_work),
        ):
            lines.append(f"{heading} ({subheading})")
            if chips:
                lines.append("  " + ", ".join(chip.text for chip in chips))
            else:
                lines.append("  (none)")
        lines.append("")

        lines.append("[p] Play Round Again  [b] Round Breakdown  [h] Home")
        return "\n".join(lines)

    def render_breakdown(self, entries: list[BreakdownEntryState]) -> str:
        lines: list[str] = ["=== Round Breakdown ==="]
        if not entries:
            lines.append("No rounds played")

        for entry in entries:
            result = "Correct" if entry.is_correct else "Incorrect"
            lines.append("")
            lines.append(f"Round {entry.round_number}: {result}")
            choices = "  ".join(format_choice(label) for label in entry.choices)
            lines.append(f"Answer Choices: {choices}")
            spoken = [s for s in (accessibility_label(label) for label in entry.choices) if s]
            if spoken:
                lines.append(f"Screen reader: {'; '.join(spoken)}")
            if entry.attempts_ordinal:
                lines.append(f"Answered correct on {entry.attempts_ordinal} attempt")
            else:
                lines.append("Never answered correctly")

        return "\n".join(lines)


__all__ = ["PlainSummaryRenderer", "format_choice", "CHOICE_MARKERS"]
