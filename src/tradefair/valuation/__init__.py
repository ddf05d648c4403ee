"""Category extraction and z-score player valuation."""

from .categories import extract_categories
from .scoring import ScoringContext, compute_per_game, value_players

__all__ = [
    "ScoringContext",
    "compute_per_game",
    "extract_categories",
    "value_players",
]
