"""Intermediate representation for summary rendering.

These dataclasses decouple the renderers from the game model. They act as
the ViewModel for the summary screens:
1. SummaryScreen builds them from a RoundSummary
2. RichSummaryDisplay or PlainSummaryRenderer renders them
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wordround.game.models import Word
from wordround.summary.aggregate import RoundSummary
from wordround.summary.choices import ChoiceLabel, label_choices
from wordround.summary.ordinal import as_ordinal


@dataclass
class WordChip:
    """A word shown in the never-missed or needs-work group."""

    text: str
    color: str  # word list colour


@dataclass
class SummaryDisplayState:
    """Everything the summary screen shows."""

    title: str
    num_correct_rounds: int
    num_total_rounds: int
    progress: Optional[float]  # None when no rounds were played

    never_missed: list[WordChip]
    needs_work: list[WordChip]

    # Terminal info
    terminal_width: int


@dataclass
class BreakdownEntryState:
    """One round card on the breakdown screen."""

    round_number: int
    is_correct: bool
    choices: list[ChoiceLabel]
    attempts_ordinal: str  # "" when the round was never solved


def _chips(words: list[Word]) -> list[WordChip]:
    return [WordChip(text=w.text, color=w.word_list.color) for w in words]


def build_summary_state(summary: RoundSummary, terminal_width: int) -> SummaryDisplayState:
    return SummaryDisplayState(
        title=summary.category_title,
        num_correct_rounds=summary.num_correct_rounds,
        num_total_rounds=summary.num_total_rounds,
        progress=summary.progress,
        never_missed=_chips(summary.never_missed),
        needs_work=_chips(summary.needs_work),
        terminal_width=terminal_width,
    )


def build_breakdown_states(summary: RoundSummary) -> list[BreakdownEntryState]:
    return [
        BreakdownEntryState(
            round_number=b.round_number,
            is_correct=b.is_correct,
            choices=label_choices(b),
            attempts_ordinal=as_ordinal(b.attempts) if b.is_correct else "",
        )
        for b in summary.round_breakdown_summary
    ]


__all__ = [
    "WordChip",
    "SummaryDisplayState",
    "BreakdownEntryState",
    "build_summary_state",
    "build_breakdown_states",
]
