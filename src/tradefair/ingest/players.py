"""Normalize provider player payloads into canonical ``Player`` records."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from tradefair.models import Player, coerce_number


logger = logging.getLogger(__name__)


def _merge_fragments(block: Any) -> Dict[str, Any]:
    """Yahoo splits player info into a list of single-key dicts; fold them together."""

    if isinstance(block, Mapping):
        return dict(block)
    merged: Dict[str, Any] = {}
    if isinstance(block, list):
        for fragment in block:
            if isinstance(fragment, Mapping):
                merged.update(fragment)
    return merged


def _resolve_name(raw: Any) -> str:
    if isinstance(raw, Mapping):
        name = raw.get("full") or raw.get("first")
    else:
        name = raw
    name = str(name).strip() if name else ""
    return name or "Unknown"


def _positions(block: Any) -> List[str]:
    if isinstance(block, Mapping):
        block = block.get("position", [])
    if isinstance(block, str):
        return [block]
    positions = []
    for item in block or []:
        if isinstance(item, Mapping):
            item = item.get("position")
        if item:
            positions.append(str(item))
    return positions


def _stats(block: Any) -> Dict[str, float]:
    if isinstance(block, Mapping):
        return {str(key): coerce_number(value) for key, value in block.items()}
    stats: Dict[str, float] = {}
    for item in block or []:
        if not isinstance(item, Mapping):
            continue
        stat = item.get("stat", item)
        if not isinstance(stat, Mapping) or stat.get("stat_id") is None:
            continue
        stats[str(stat["stat_id"])] = coerce_number(stat.get("value"))
    return stats


def _from_yahoo(raw: Mapping[str, Any]) -> Optional[Player]:
    parts: Sequence[Any] = raw.get("player") or []
    info = _merge_fragments(parts[0] if len(parts) > 0 else {})
    extra = _merge_fragments(parts[1] if len(parts) > 1 else {})

    player_stats = _merge_fragments(extra.get("player_stats"))
    player_points = _merge_fragments(extra.get("player_points"))
    stats_block = player_points.get("stats") or player_stats.get("stats") or []

    key = raw.get("player_key") or info.get("player_key") or info.get("player_id")
    if not key:
        return None
    positions = _positions(extra.get("eligible_positions") or info.get("eligible_positions"))
    return Player(
        player_key=str(key),
        name=_resolve_name(info.get("name")),
        positions=positions,
        raw_stats=_stats(stats_block),
        games_played=player_stats.get("coverage_value"),
    )


def _from_flat(raw: Mapping[str, Any]) -> Optional[Player]:
    key = raw.get("player_key") or raw.get("player_id")
    if not key:
        return None
    positions = raw.get("positions")
    if positions is None:
        positions = raw.get("pos")
    stats = raw.get("raw_stats")
    if stats is None:
        stats = raw.get("stats")
    games = raw.get("games_played")
    if games is None:
        games = raw.get("gp")
    return Player(
        player_key=str(key),
        name=_resolve_name(raw.get("name")),
        positions=_positions(positions) if not isinstance(positions, str) else positions,
        raw_stats=_stats(stats),
        games_played=games,
    )


def normalize_player(raw: Mapping[str, Any] | Player) -> Optional[Player]:
    """Convert one provider record, returning ``None`` when it has no player key."""

    if isinstance(raw, Player):
        return raw
    if not isinstance(raw, Mapping):
        return None
    if isinstance(raw.get("player"), list):
        return _from_yahoo(raw)
    return _from_flat(raw)


def normalize_players(records: Iterable[Mapping[str, Any] | Player] | None) -> List[Player]:
    players: List[Player] = []
    for raw in records or []:
        player = normalize_player(raw)
        if player is None:
            logger.debug("Skipping player record without a key: %r", raw)
            continue
        players.append(player)
    return players
