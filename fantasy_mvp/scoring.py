"""Fantasy point scoring for a player-season."""

import math
from typing import Dict, Tuple

from .schemas import PlayerSeason, ScoringConfig


def round_points(points: float) -> float:
    """Round to one decimal place, halves away from zero."""
    scaled = abs(points) * 10
    # + 0.0 turns -0.0 into 0.0
    return math.copysign(math.floor(scaled + 0.5), points) / 10 + 0.0


def score_player_season(player: PlayerSeason, config: ScoringConfig) -> Tuple[float, Dict[str, float]]:
    """
    Score a player-season under a scoring configuration.

    Scoring (defaults in parentheses):
        - Passing yards: 1 point per N yards (25)
        - Passing TDs (4), interceptions (-2)
        - Rushing yards: 1 point per N yards (10)
        - Rushing TDs (6), carries (0)
        - Receiving yards: 1 point per N yards (10)
        - Receiving TDs (6), receptions (0, 1 for PPR)
        - Fumbles lost (-2)

    The total is rounded once, after every term is summed. A non-finite
    total is returned as-is so the caller can reject it.

    Returns:
        Tuple of (total points, breakdown of non-zero terms by category)
    """
    terms = {
        'passing_yards': player.pass_yds / config.passing_yards_per_point,
        'passing_tds': player.pass_td * config.passing_td,
        'interceptions': player.pass_int * config.interception,
        'rushing_yards': player.rush_yds / config.rushing_yards_per_point,
        'rushing_tds': player.rush_td * config.rushing_td,
        'carries': player.rush_att * config.rushing_carry,
        'receiving_yards': player.rec_yds / config.receiving_yards_per_point,
        'receiving_tds': player.rec_td * config.receiving_td,
        'receptions': player.rec * config.reception,
        'fumbles_lost': player.fmb_lost * config.fumble_lost,
    }

    points = 0.0
    breakdown = {}
    for category, value in terms.items():
        points += value
        if value:
            breakdown[category] = value

    if not math.isfinite(points):
        return points, breakdown

    return round_points(points), breakdown


def score(player: PlayerSeason, config: ScoringConfig) -> float:
    """Fantasy points for a player-season, rounded to one decimal."""
    points, _ = score_player_season(player, config)
    return points
