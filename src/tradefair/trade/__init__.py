"""Trade simulation, impact measurement and verdicts."""

from .impact import TeamImpact, team_trade_impact
from .service import TradeEvaluation, TradePreconditionError, evaluate_trade
from .verdict import Verdict, VerdictStatus, verdict

__all__ = [
    "TeamImpact",
    "TradeEvaluation",
    "TradePreconditionError",
    "Verdict",
    "VerdictStatus",
    "evaluate_trade",
    "team_trade_impact",
    "verdict",
]
