"""Derivation pipeline: filter, score, sort, truncate, rank."""

import logging
import math
from typing import List, Optional, Sequence

from .constants import MAX_RESULTS
from .filters import YearFilter, latest_year, position_predicate, year_predicate
from .models import ScoredPlayerSeason
from .schemas import PlayerSeason, ScoringConfig
from .scoring import score_player_season

logger = logging.getLogger('fantasy_mvp.pipeline')


class ScoringFaultError(RuntimeError):
    """Raised when a player-season scores to NaN or infinity."""


def derive(
    raw_records: Sequence[PlayerSeason],
    position_filter: str,
    year_filter: YearFilter,
    config: ScoringConfig,
    max_results: int = MAX_RESULTS,
    reference_year: Optional[int] = None,
) -> List[ScoredPlayerSeason]:
    """
    Build the ranked view of player-seasons.

    Steps:
        1. Keep records matching the position and year filters
        2. Score each surviving record
        3. Sort by fantasy points, descending (ties keep dataset order)
        4. Truncate to max_results
        5. Assign ranks 1..n

    Args:
        raw_records: Full dataset, in dataset order
        position_filter: 'All' or a position code
        year_filter: Normalized year filter
        config: Scoring rules
        max_results: Top-N cutoff
        reference_year: Anchor for relative year filters (default: latest
            season in raw_records)

    Returns:
        Ranked list, at most max_results long (may be empty)

    Raises:
        ScoringFaultError: If any record scores to a non-finite value
        ValueError: If max_results is negative
    """
    if max_results < 0:
        raise ValueError(f'max_results must be >= 0, got {max_results}')

    if reference_year is None:
        reference_year = latest_year(raw_records)

    matches_position = position_predicate(position_filter)
    matches_year = year_predicate(year_filter, reference_year)

    scored = []
    for record in raw_records:
        if not (matches_position(record) and matches_year(record)):
            continue
        points, breakdown = score_player_season(record, config)
        if not math.isfinite(points):
            raise ScoringFaultError(
                f'{record.player} ({record.year}) scored {points} - check scoring config'
            )
        scored.append(ScoredPlayerSeason(season=record, fantasy_points=points, breakdown=breakdown))

    # list.sort is stable, so exact ties keep dataset order
    scored.sort(key=lambda row: row.fantasy_points, reverse=True)

    top = scored[:max_results]
    for index, row in enumerate(top):
        row.rank = index + 1

    logger.debug(
        f'Derived {len(top)} of {len(scored)} matching rows '
        f'(position={position_filter}, year={year_filter}, reference={reference_year})'
    )
    return top
