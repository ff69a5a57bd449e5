"""Shared fixtures for unit tests."""

import pytest
from wordround.game.models import Game, GameStatus, Round, Word, WordList


@pytest.fixture
def cat_dog_game() -> Game:
    """Completed game: cat right first time, dog after one miss."""
    animals = WordList(name="Animals", color="green")
    return Game(
        rounds=[
            Round(word=Word("cat", animals), choices=("cat", "kitten")),
            Round(
                word=Word("dog", animals),
                choices=("puppy", "dog", "a-very-long-choice"),
                incorrect_guesses=("puppy",),
            ),
        ],
        status=GameStatus.COMPLETED,
    )
