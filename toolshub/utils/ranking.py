# toolshub/utils/ranking.py
#
# Derived views over tool and category dicts as returned by the API
# (camelCase keys). Nothing here touches the database or the network.

import enum
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

MAX_RATING = 5
FEATURED_LIMIT = 6
RELATED_LIMIT = 3


class StarKind(enum.Enum):
    FULL = "full"
    HALF = "half"
    EMPTY = "empty"


def _rating(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(rating):
        return 0.0
    return min(max(rating, 0.0), float(MAX_RATING))


def _timestamp(value: Any) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp()
        except ValueError:
            return 0.0
    return 0.0


def render_stars(rating: Any) -> List[StarKind]:
    rating = _rating(rating)

    full_stars = math.floor(rating)
    half_star = (rating % 1) >= 0.5
    empty_stars = MAX_RATING - full_stars - (1 if half_star else 0)

    stars = [StarKind.FULL] * full_stars
    if half_star:
        stars.append(StarKind.HALF)
    stars.extend([StarKind.EMPTY] * empty_stars)
    return stars


def _by_rating(tools: List[Dict]) -> List[Dict]:
    return sorted(tools, key=lambda t: _rating(t.get("rating")), reverse=True)


def _unique_by_slug(tools: List[Dict]) -> List[Dict]:
    seen = set()
    result = []
    for tool in tools:
        slug = tool.get("slug")
        if slug in seen:
            continue
        seen.add(slug)
        result.append(tool)
    return result


def select_featured_tools(tools: List[Dict], limit: int = FEATURED_LIMIT) -> List[Dict]:
    """Highest rated first, newest first among equal ratings."""
    ordered = sorted(
        tools,
        key=lambda t: (_rating(t.get("rating")), _timestamp(t.get("createdAt"))),
        reverse=True,
    )
    return _unique_by_slug(ordered)[:limit]


def select_related_tools(tool: Dict, tools: List[Dict], limit: int = RELATED_LIMIT) -> List[Dict]:
    """Same-category tools by rating, backfilled with the best of the rest."""
    slug = tool.get("slug")
    category = tool.get("categorySlug")

    candidates = _unique_by_slug([t for t in tools if t.get("slug") != slug])

    related = _by_rating([t for t in candidates if t.get("categorySlug") == category])
    if len(related) < limit:
        chosen = {t.get("slug") for t in related}
        related.extend(t for t in _by_rating(candidates) if t.get("slug") not in chosen)

    return related[:limit]


def _matches(term: str, *fields: Optional[str], tags: Optional[List[str]] = None) -> bool:
    for field in fields:
        if field and term in field.lower():
            return True
    return any(term in (tag or "").lower() for tag in (tags or []))


def filter_categories(categories: List[Dict], term: Optional[str]) -> List[Dict]:
    term = (term or "").strip().lower()
    if not term:
        return list(categories)

    return [
        c for c in categories
        if _matches(term, c.get("name"), c.get("description"), tags=c.get("tags"))
    ]


def filter_tools(tools: List[Dict], term: Optional[str]) -> List[Dict]:
    term = (term or "").strip().lower()
    if not term:
        return list(tools)

    return [
        t for t in tools
        if _matches(term, t.get("name"), t.get("summary"), tags=t.get("tags"))
    ]
