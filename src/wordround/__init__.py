"""Post-round summary screens for a word-learning game."""
