"""Round summary aggregation for the post-game screens.

Everything here is a pure function of the rounds passed in. The game model
calls ``summarize_rounds`` whenever a screen asks for summary data, so the
result always reflects the current snapshot of the game.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from wordround.game.models import Round, RoundBreakdown, Word

logger = logging.getLogger(__name__)

CUSTOM_TITLE = "Custom"
EMPTY_TITLE = "Empty"


@dataclass(frozen=True)
class RoundSummary:
    """Derived results of a finished game."""

    num_correct_rounds: int = 0
    num_total_rounds: int = 0
    never_missed: list[Word] = field(default_factory=list)
    needs_work: list[Word] = field(default_factory=list)
    round_breakdown_summary: list[RoundBreakdown] = field(default_factory=list)
    category_title: str = EMPTY_TITLE

    @property
    def has_rounds(self) -> bool:
        return self.num_total_rounds > 0

    @property
    def progress(self) -> Optional[float]:
        """Fraction of correct rounds, or None when no rounds were played."""
        if not self.has_rounds:
            return None
        return self.num_correct_rounds / self.num_total_rounds


def category_title(rounds: Sequence[Round]) -> str:
    """Name the word list the game drew from.

    Returns:
        The shared word-list name, CUSTOM_TITLE when rounds span several
        lists, or EMPTY_TITLE when there are no rounds
    """
    if not rounds:
        return EMPTY_TITLE

    first = rounds[0].word.word_list.name
    for round_ in rounds:
        if round_.word.word_list.name != first:
            return CUSTOM_TITLE
    return first


def summarize_rounds(rounds: Sequence[Round]) -> RoundSummary:
    """Partition words by first-attempt correctness and count rounds.

    Rounds that were never solved land in ``needs_work`` along with rounds
    that took more than one attempt.
    """
    never_missed: list[Word] = []
    needs_work: list[Word] = []
    breakdowns: list[RoundBreakdown] = []
    num_correct = 0

    for number, round_ in enumerate(rounds, start=1):
        if round_.is_correct:
            num_correct += 1
        else:
            logger.debug(f"Round {number} ({round_.word.text}) was never solved")

        if round_.missed_first_attempt:
            needs_work.append(round_.word)
        else:
            never_missed.append(round_.word)

        breakdowns.append(RoundBreakdown.from_round(number, round_))

    summary = RoundSummary(
        num_correct_rounds=num_correct,
        num_total_rounds=len(rounds),
        never_missed=never_missed,
        needs_work=needs_work,
        round_breakdown_summary=breakdowns,
        category_title=category_title(rounds),
    )
    logger.debug(
        f"Summarized {summary.num_total_rounds} rounds: "
        f"{summary.num_correct_rounds} correct, "
        f"{len(never_missed)} never missed, {len(needs_work)} need work"
    )
    return summary


__all__ = ["RoundSummary", "summarize_rounds", "category_title", "CUSTOM_TITLE", "EMPTY_TITLE"]
