"""Input adapters that normalize raw provider player data."""

from .players import normalize_player, normalize_players

__all__ = [
    "normalize_player",
    "normalize_players",
]
