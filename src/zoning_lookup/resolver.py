"""Resolve a point to a zoning code from a set of candidate records.

Overlapping boundaries are resolved by input order under ``FIRST_MATCH``;
there is no priority rule between districts. City zoning is expected to be a
spatial partition, in which case the first match is also the only match.
"""

from enum import Enum
from typing import Iterable, Optional, Sequence

from loguru import logger

from zoning_lookup.exceptions import Ambiguous, NoMatch
from zoning_lookup.geometry import contains
from zoning_lookup.models import Point, ZoningRecord


class MatchPolicy(Enum):
    """How to pick a result when more than one boundary may match."""

    FIRST_MATCH = "first_match"
    REQUIRE_EXACTLY_ONE = "require_exactly_one"


def select_candidate(candidates: Sequence[str], policy: MatchPolicy) -> str:
    """Apply ``policy`` to codes that are already known to contain the point.

    Used directly for server-side spatial queries, where the provider has done
    the containment test.

    Raises:
        NoMatch: If there are no candidates
        Ambiguous: If policy requires one candidate and there are several
    """
    if not candidates:
        raise NoMatch("No boundary contains the point")
    if policy is MatchPolicy.REQUIRE_EXACTLY_ONE and len(candidates) > 1:
        raise Ambiguous(f"{len(candidates)} boundaries contain the point: {list(candidates)}")
    return candidates[0]


def resolve_strict(
    point: Point,
    records: Iterable[ZoningRecord],
    policy: MatchPolicy = MatchPolicy.FIRST_MATCH,
) -> str:
    """Like ``resolve`` but raises the failure category instead of returning None."""
    matches: list[str] = []
    for record in records:
        if not contains(point, record.boundary):
            continue
        matches.append(record.code)
        if policy is MatchPolicy.FIRST_MATCH:
            break
        if len(matches) > 1:
            break

    return select_candidate(matches, policy)


def resolve(
    point: Point,
    records: Iterable[ZoningRecord],
    policy: MatchPolicy = MatchPolicy.FIRST_MATCH,
) -> Optional[str]:
    """Return the zoning code of the record containing ``point``.

    Args:
        point: Location to resolve
        records: Zoning records, scanned in order
        policy: ``FIRST_MATCH`` returns the first containing record;
            ``REQUIRE_EXACTLY_ONE`` returns None unless exactly one contains it

    Returns:
        Zoning code, or None when nothing (or, under the strict policy, more
        than one thing) matches
    """
    try:
        return resolve_strict(point, records, policy)
    except (NoMatch, Ambiguous) as e:
        logger.debug("No zoning resolved for {}: {}", point, e)
        return None
