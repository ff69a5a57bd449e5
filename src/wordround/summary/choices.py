"""Answer-choice labelling for the round breakdown."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from wordround.game.models import RoundBreakdown

# Fixed display width; choices longer than this are cut and marked
MAX_CHOICE_LENGTH = 11
ELLIPSIS = "…"


class ChoiceClass(Enum):
    CORRECT = "correct"
    INCORRECTLY_GUESSED = "incorrectly_guessed"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ChoiceLabel:
    """One answer choice ready for display."""

    display_text: str
    classification: ChoiceClass
    choice: str  # untruncated


def truncate_choice(choice: str) -> str:
    """Cut a choice to MAX_CHOICE_LENGTH characters plus an ellipsis."""
    if len(choice) <= MAX_CHOICE_LENGTH:
        return choice
    return choice[:MAX_CHOICE_LENGTH] + ELLIPSIS


def classify_choice(
    choice: str,
    correct_choice: str,
    incorrect_guesses: Iterable[str],
) -> ChoiceClass:
    """Classify a choice. The correct choice wins over a recorded guess."""
    if choice == correct_choice:
        return ChoiceClass.CORRECT
    if choice in incorrect_guesses:
        return ChoiceClass.INCORRECTLY_GUESSED
    return ChoiceClass.NEUTRAL


def label_choice(
    choice: str,
    correct_choice: str,
    incorrect_guesses: Iterable[str],
) -> ChoiceLabel:
    """Build the display text and classification for one choice."""
    return ChoiceLabel(
        display_text=truncate_choice(choice),
        classification=classify_choice(choice, correct_choice, tuple(incorrect_guesses)),
        choice=choice,
    )


def label_choices(breakdown: RoundBreakdown) -> list[ChoiceLabel]:
    """Label every choice of a round, in presentation order."""
    return [
        label_choice(choice, breakdown.correct_choice, breakdown.incorrect_guesses)
        for choice in breakdown.all_choices
    ]


def accessibility_label(label: ChoiceLabel) -> Optional[str]:
    """Spoken description for screen readers; neutral choices get none."""
    if label.classification is ChoiceClass.CORRECT:
        return f"{label.choice} is correct"
    if label.classification is ChoiceClass.INCORRECTLY_GUESSED:
        return f"{label.choice} is incorrect"
    return None


__all__ = [
    "ChoiceClass",
    "ChoiceLabel",
    "MAX_CHOICE_LENGTH",
    "ELLIPSIS",
    "truncate_choice",
    "classify_choice",
    "label_choice",
    "label_choices",
    "accessibility_label",
]
