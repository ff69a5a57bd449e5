"""Summary screen controller: recomputation, navigation and commands."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union

from rich.console import RenderableType

from wordround.game.models import Game
from wordround.summary.aggregate import RoundSummary, summarize_rounds
from wordround.summary.display import PlainSummaryRenderer
from wordround.summary.display_state import build_breakdown_states, build_summary_state
from wordround.summary.rich_display import RichSummaryDisplay

logger = logging.getLogger(__name__)


class GameViewModel(Protocol):
    """The game owner. The summary screen only reads ``game`` and asks for a replay."""

    game: Game

    def play_again(self) -> None:
        ...


class Screen(Enum):
    SUMMARY = "summary"
    BREAKDOWN = "breakdown"
    HOME = "home"


@dataclass
class SummaryConfig:
    """Configuration for the summary screens."""

    plain: Optional[bool] = None  # None = detect from stdout
    terminal_width: Optional[int] = None  # None = console width
    show_breakdown: bool = False

    def __post_init__(self):
        """Pick plain output when not attached to a terminal."""
        if self.plain is None:
            self.plain = (
                not sys.stdout.isatty()
                or bool(os.environ.get("FORCE_PLAIN_DISPLAY"))
            )


class SummaryScreen:
    """Presents a finished game and forwards the player's commands."""

    def __init__(self, view_model: GameViewModel, config: Optional[SummaryConfig] = None):
        self.view_model = view_model
        self.config = config or SummaryConfig()

        # Components
        self.rich_display = RichSummaryDisplay(width=self.config.terminal_width)
        self.plain_renderer = PlainSummaryRenderer()

        # Screen state
        self.current = Screen.BREAKDOWN if self.config.show_breakdown else Screen.SUMMARY
        self.summary: RoundSummary = summarize_rounds(view_model.game.rounds)
        self._unsubscribe = view_model.game.subscribe(self.refresh)

    def refresh(self, game: Optional[Game] = None) -> RoundSummary:
        """Recompute the summary from the game's current rounds."""
        game = game or self.view_model.game
        self.summary = summarize_rounds(game.rounds)
        logger.debug(f"Summary refreshed: {self.summary.num_correct_rounds}/{self.summary.num_total_rounds}")
        return self.summary

    def close(self) -> None:
        """Stop listening for game changes."""
        self._unsubscribe()

    # Navigation

    def show_breakdown(self) -> None:
        self.current = Screen.BREAKDOWN

    def go_home(self) -> None:
        self.current = Screen.HOME

    def back(self) -> None:
        self.current = Screen.SUMMARY

    # Commands

    def play_again(self) -> None:
        """Ask the game owner for a replay and return to the summary."""
        logger.info("Play again requested")
        self.view_model.play_again()
        self.current = Screen.SUMMARY

    def handle_key(self, key: str) -> Optional[str]:
        """Dispatch a single-key command.

        Returns:
            Error message for unknown keys, otherwise None
        """
        key = key.strip().lower()
        if key == "p":
            self.play_again()
        elif key == "b":
            self.show_breakdown()
        elif key == "h":
            self.go_home()
        elif key in ("q", ""):
            self.back()
        else:
            return f"Unknown command: {key!r}"
        return None

    # Rendering

    def terminal_width(self) -> int:
        if self.config.terminal_width is not None:
            return self.config.terminal_width
        return self.rich_display.get_terminal_width()

    def render(self) -> Union[RenderableType, str]:
        """Render the current screen (rich renderable, or text in plain mode)."""
        if self.current is Screen.BREAKDOWN:
            entries = build_breakdown_states(self.summary)
            if self.config.plain:
                return self.plain_renderer.render_breakdown(entries)
            return self.rich_display.render_breakdown(entries)

        if self.current is Screen.HOME:
            return "Home"

        state = build_summary_state(self.summary, self.terminal_width())
        if self.config.plain:
            return self.plain_renderer.render_summary(state)
        return self.rich_display.render_summary(state)


__all__ = ["SummaryScreen", "SummaryConfig", "GameViewModel", "Screen"]
