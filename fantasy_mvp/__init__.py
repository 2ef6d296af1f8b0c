from .schemas import PlayerSeason, PlayerSeasonsFile, ScoringConfig, PersistedState
from .models import ScoredPlayerSeason
from .scoring import score, score_player_season, round_points
from .filters import (
    parse_position_filter,
    parse_year_filter,
    filter_by_position,
    filter_by_year_range,
)
from .pipeline import derive, ScoringFaultError
from .config import ScoringSettings, FantasyState, ConfigValidationError
from .columns import Column, get_columns_for_position, get_column_groups, render_table
from .data_loader import load_player_seasons, DataLoadError
from .app import FantasyApp

__all__ = [
    # Schemas and models
    'PlayerSeason',
    'PlayerSeasonsFile',
    'ScoringConfig',
    'PersistedState',
    'ScoredPlayerSeason',
    # Scoring
    'score',
    'score_player_season',
    'round_points',
    # Filters
    'parse_position_filter',
    'parse_year_filter',
    'filter_by_position',
    'filter_by_year_range',
    # Derivation
    'derive',
    'ScoringFaultError',
    # Configuration and state
    'ScoringSettings',
    'FantasyState',
    'ConfigValidationError',
    # Presentation
    'Column',
    'get_columns_for_position',
    'get_column_groups',
    'render_table',
    # Data loading
    'load_player_seasons',
    'DataLoadError',
    'FantasyApp',
]
