"""Labelled console logging and the JSON Lines diagnostic log."""
