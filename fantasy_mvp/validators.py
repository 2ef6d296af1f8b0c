"""Sanity checks for scoring configs and derived views."""

import math

from .models import ScoredPlayerSeason
from .schemas import YARDS_PER_POINT_FIELDS, ScoringConfig

# Best real seasons land around 400-500 points under common rules
SEASON_POINTS_HIGH = 1000
SEASON_POINTS_LOW = -100


def validate_scoring_config(config: ScoringConfig) -> list[str]:
    """
    Flag legal but suspicious scoring rules.

    Checks:
    - Negative yards-per-point (yardage would cost points)
    - Positive interception or fumble-lost values (turnovers would earn points)

    Returns:
        List of warning messages (empty if nothing stands out)
    """
    warnings = []

    for name in YARDS_PER_POINT_FIELDS:
        value = getattr(config, name)
        if value < 0:
            warnings.append(f'{name} is negative ({value}) - yardage will subtract points')

    if config.interception > 0:
        warnings.append(f'interception is positive ({config.interception}) - interceptions add points')
    if config.fumble_lost > 0:
        warnings.append(f'fumble_lost is positive ({config.fumble_lost}) - lost fumbles add points')

    return warnings


def validate_player_score(scored: ScoredPlayerSeason) -> list[str]:
    """
    Check that a player-season's score is reasonable and internally consistent.

    Sanity checks:
    - No NaN or infinity values
    - Total points in a plausible season range
    - Breakdown totals match final score (within rounding)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    name = f'{scored.season.player} ({scored.season.year})'

    if not math.isfinite(scored.fantasy_points):
        warnings.append(f'{name} has non-finite score: {scored.fantasy_points}')
        return warnings

    if scored.fantasy_points > SEASON_POINTS_HIGH:
        warnings.append(
            f'{name} scored {scored.fantasy_points:.1f} pts (unusually high - check scoring config)'
        )
    elif scored.fantasy_points < SEASON_POINTS_LOW:
        warnings.append(
            f'{name} scored {scored.fantasy_points:.1f} pts (unusually low - check scoring config)'
        )

    if scored.breakdown:
        breakdown_sum = sum(scored.breakdown.values())
        diff = abs(breakdown_sum - scored.fantasy_points)
        if diff > 0.1:
            warnings.append(
                f'{name} breakdown sum ({breakdown_sum:.1f}) != total ({scored.fantasy_points:.1f}) - difference: {diff:.2f}'
            )

    return warnings


def validate_derived_view(rows: list[ScoredPlayerSeason], max_results: int) -> list[str]:
    """
    Check the invariants of a ranked view.

    Checks:
    - No more than max_results rows
    - Ranks are exactly 1..n
    - Points never increase down the list

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if len(rows) > max_results:
        errors.append(f'View has {len(rows)} rows (max {max_results})')

    ranks = [row.rank for row in rows]
    if ranks != list(range(1, len(rows) + 1)):
        errors.append(f'Ranks are not contiguous from 1: {ranks[:10]}...')

    for above, below in zip(rows, rows[1:]):
        if above.fantasy_points < below.fantasy_points:
            errors.append(
                f'Rank {above.rank} ({above.fantasy_points:.1f}) is below '
                f'rank {below.rank} ({below.fantasy_points:.1f})'
            )
            break

    return errors
