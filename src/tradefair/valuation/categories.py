"""Scoring category extraction from league settings."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from tradefair.models import Category, parse_stat_id


logger = logging.getLogger(__name__)

_EXCLUDED_NAME_TOKENS = ("games played",)


def _iter_stat_descriptors(settings: Mapping[str, Any] | None) -> Iterable[Mapping[str, Any]]:
    if not isinstance(settings, Mapping):
        return []
    block = settings.get("stat_categories")
    if not isinstance(block, Mapping):
        return []
    stats = block.get("stats") or block.get("stat") or []
    if not isinstance(stats, list):
        return []
    descriptors = []
    for item in stats:
        if not isinstance(item, Mapping):
            continue
        inner = item.get("stat", item)
        if isinstance(inner, Mapping):
            descriptors.append(inner)
    return descriptors


def extract_categories(settings: Mapping[str, Any] | None) -> List[Category]:
    """Return the comparable stat categories declared by ``settings``.

    Descriptors without a numeric stat id, or whose name mentions games played, are
    skipped. Malformed settings yield an empty list.
    """

    categories: List[Category] = []
    seen: set[int] = set()
    for descriptor in _iter_stat_descriptors(settings):
        stat_id = parse_stat_id(descriptor.get("stat_id"))
        if stat_id is None:
            continue
        name = str(descriptor.get("name") or "")
        if any(token in name.lower() for token in _EXCLUDED_NAME_TOKENS):
            continue
        if stat_id in seen:
            logger.debug("Skipping duplicate stat category id %s (%s)", stat_id, name)
            continue
        seen.add(stat_id)
        position_type = descriptor.get("position_type")
        categories.append(
            Category(
                id=stat_id,
                name=name,
                position_type=str(position_type) if position_type else None,
            )
        )
    return categories
