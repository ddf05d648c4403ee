"""Canonical models shared by valuation, lineup and trade layers."""

from .player import Category, Player, coerce_number, parse_stat_id

__all__ = ["Category", "Player", "coerce_number", "parse_stat_id"]
