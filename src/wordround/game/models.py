"""Game data consumed by the summary screens.

The game itself (round generation, scoring, guessing) lives elsewhere. These
types carry the finished results the summary layer reads. Values are
immutable; only the Game aggregate is mutated, and only by its owner.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from wordround.summary.aggregate import RoundSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordList:
    """A named category of vocabulary words."""

    name: str
    color: str = "blue"  # rich colour name


@dataclass(frozen=True)
class Word:
    """Immutable vocabulary word."""

    text: str
    word_list: WordList

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Round:
    """One question/answer cycle.

    ``incorrect_guesses`` are the wrong selections made before the player
    found the correct choice (or gave up, when ``solved`` is False).
    """

    word: Word
    choices: tuple[str, ...] = ()
    correct_choice: Optional[str] = None  # defaults to word.text
    incorrect_guesses: tuple[str, ...] = ()
    solved: bool = True

    def __post_init__(self) -> None:
        if self.correct_choice is None:
            object.__setattr__(self, "correct_choice", self.word.text)
        # Accept lists from callers but keep the value hashable
        object.__setattr__(self, "choices", tuple(self.choices))
        object.__setattr__(self, "incorrect_guesses", tuple(self.incorrect_guesses))

    @property
    def is_correct(self) -> bool:
        return self.solved

    @property
    def attempts(self) -> int:
        """Selections made, counting the final correct one."""
        if self.solved:
            return len(self.incorrect_guesses) + 1
        return len(self.incorrect_guesses)

    @property
    def missed_first_attempt(self) -> bool:
        return bool(self.incorrect_guesses) or not self.solved


@dataclass(frozen=True)
class RoundBreakdown:
    """Read-only per-round snapshot for the breakdown screen."""

    round_number: int
    is_correct: bool
    all_choices: tuple[str, ...]
    correct_choice: str
    incorrect_guesses: tuple[str, ...]
    attempts: int

    @classmethod
    def from_round(cls, round_number: int, round_: Round) -> "RoundBreakdown":
        return cls(
            round_number=round_number,
            is_correct=round_.is_correct,
            all_choices=round_.choices,
            correct_choice=round_.correct_choice,
            incorrect_guesses=round_.incorrect_guesses,
            attempts=round_.attempts,
        )


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


Listener = Callable[["Game"], None]


@dataclass
class Game:
    """Ordered rounds of one play-through plus change notification.

    Summary properties are recomputed from ``rounds`` on every access, so a
    subscriber reading them after a notification always sees the current
    snapshot.
    """

    rounds: list[Round] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS

    # Internal state
    _listeners: list[Listener] = field(default_factory=list, repr=False, compare=False)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def add_round(self, round_: Round) -> None:
        self.rounds.append(round_)
        self.notify()

    def complete(self) -> None:
        self.status = GameStatus.COMPLETED
        self.notify()

    def reset(self) -> None:
        """Drop all rounds and return to in-progress."""
        self.rounds.clear()
        self.status = GameStatus.IN_PROGRESS
        self.notify()

    def summary(self) -> "RoundSummary":
        from wordround.summary.aggregate import summarize_rounds

        return summarize_rounds(self.rounds)

    @property
    def num_correct_rounds(self) -> int:
        return self.summary().num_correct_rounds

    @property
    def num_total_rounds(self) -> int:
        return len(self.rounds)

    @property
    def never_missed(self) -> list[Word]:
        return self.summary().never_missed

    @property
    def needs_work(self) -> list[Word]:
        return self.summary().needs_work

    @property
    def round_breakdown_summary(self) -> list[RoundBreakdown]:
        return self.summary().round_breakdown_summary

    @property
    def category_title(self) -> str:
        return self.summary().category_title

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "rounds": [
                {
                    "word": r.word.text,
                    "word_list": {"name": r.word.word_list.name, "color": r.word.word_list.color},
                    "choices": list(r.choices),
                    "correct_choice": r.correct_choice,
                    "incorrect_guesses": list(r.incorrect_guesses),
                    "solved": r.solved,
                }
                for r in self.rounds
            ],
        }


def _require(data: dict, key: str, kind: type, where: str) -> Any:
    if key not in data:
        raise ValueError(f"{where}: missing '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"{where}: '{key}' must be {kind.__name__}")
    return value


def _string_list(data: dict, key: str, where: str) -> tuple[str, ...]:
    values = data.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"{where}: '{key}' must be a list of strings")
    return tuple(values)


def game_from_dict(data: dict) -> Game:
    """Build a Game from its dictionary form.

    Raises:
        ValueError: if a field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError("game: expected an object")

    status_value = data.get("status", GameStatus.COMPLETED.value)
    try:
        status = GameStatus(status_value)
    except ValueError:
        raise ValueError(f"game: unknown status {status_value!r}") from None

    word_lists: dict[tuple[str, str], WordList] = {}
    rounds: list[Round] = []
    for i, raw in enumerate(_require(data, "rounds", list, "game")):
        where = f"rounds[{i}]"
        if not isinstance(raw, dict):
            raise ValueError(f"{where}: expected an object")

        text = _require(raw, "word", str, where)
        list_data = _require(raw, "word_list", dict, where)
        name = _require(list_data, "name", str, f"{where}.word_list")
        color = "blue"
        if "color" in list_data:
            color = _require(list_data, "color", str, f"{where}.word_list")
        # Rounds from the same category share one WordList value
        word_list = word_lists.setdefault((name, color), WordList(name=name, color=color))

        correct_choice = raw.get("correct_choice")
        if correct_choice is not None and not isinstance(correct_choice, str):
            raise ValueError(f"{where}: 'correct_choice' must be str")
        solved = raw.get("solved", True)
        if not isinstance(solved, bool):
            raise ValueError(f"{where}: 'solved' must be bool")

        rounds.append(Round(
            word=Word(text=text, word_list=word_list),
            choices=_string_list(raw, "choices", where),
            correct_choice=correct_choice,
            incorrect_guesses=_string_list(raw, "incorrect_guesses", where),
            solved=solved,
        ))

    logger.debug(f"Loaded game with {len(rounds)} rounds ({status.value})")
    return Game(rounds=rounds, status=status)
