"""Fantasy hockey trade fairness evaluation."""

from tradefair.config import SlotRequirements, Thresholds
from tradefair.models import Category, Player
from tradefair.trade import TradeEvaluation, TradePreconditionError, evaluate_trade

__all__ = [
    "Category",
    "Player",
    "SlotRequirements",
    "Thresholds",
    "TradeEvaluation",
    "TradePreconditionError",
    "evaluate_trade",
]

__version__ = "0.1.0"
