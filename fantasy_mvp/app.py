"""Application facade tying the dataset, user state, and derivation together."""

import logging
from pathlib import Path
from typing import List, Optional

from .columns import Column, get_columns_for_position
from .config import FantasyState
from .constants import MAX_RESULTS
from .data_loader import DataLoadError, load_player_seasons
from .models import ScoredPlayerSeason
from .pipeline import derive
from .schemas import PlayerSeason
from .validators import validate_derived_view, validate_player_score

logger = logging.getLogger('fantasy_mvp.app')


class FantasyApp:
    """
    Loads the dataset once and recomputes the ranked view on demand.

    The view is rebuilt from the immutable dataset on every call to rows(),
    using whatever filters and scoring rules the state holds at that moment.
    """

    def __init__(self, state: Optional[FantasyState] = None, max_results: int = MAX_RESULTS):
        self.state = state or FantasyState()
        self.max_results = max_results
        self.records: tuple[PlayerSeason, ...] = ()
        self.loading = True
        self.error: Optional[str] = None

    def load_data(self, source: str | Path) -> bool:
        """
        Load the dataset. On failure the error is kept and the view stays empty.

        Returns:
            True if the dataset loaded
        """
        self.loading = True
        self.error = None
        try:
            self.records = tuple(load_player_seasons(source))
        except DataLoadError as e:
            self.records = ()
            self.error = str(e)
            logger.error(f'Error loading data: {e}')
            return False
        finally:
            self.loading = False
        return True

    def set_records(self, records: List[PlayerSeason]) -> None:
        """Use an already-loaded dataset."""
        self.records = tuple(records)
        self.loading = False
        self.error = None

    def rows(self) -> List[ScoredPlayerSeason]:
        """Ranked view for the current filters and scoring rules."""
        if self.loading or self.error or not self.records:
            return []

        rows = derive(
            self.records,
            self.state.position_filter,
            self.state.year_filter,
            self.state.scoring_config,
            max_results=self.max_results,
        )
        for problem in validate_derived_view(rows, self.max_results):
            logger.warning(problem)
        for row in rows:
            for warning in validate_player_score(row):
                logger.debug(warning)
        return rows

    def columns(self) -> List[Column]:
        """Columns for the current position filter."""
        return get_columns_for_position(self.state.position_filter)
