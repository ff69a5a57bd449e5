"""Game data read by the summary screens."""

from wordround.game.models import (
    Game,
    GameStatus,
    Round,
    RoundBreakdown,
    Word,
    WordList,
    game_from_dict,
)

__all__ = ["Game", "GameStatus", "Round", "RoundBreakdown", "Word", "WordList", "game_from_dict"]
