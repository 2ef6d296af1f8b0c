"""Data models for Fantasy MVP."""

from dataclasses import dataclass, field
from typing import Any, Dict

from .schemas import PlayerSeason


@dataclass
class ScoredPlayerSeason:
    """A player-season with its fantasy points and rank in the current view."""
    season: PlayerSeason
    fantasy_points: float = 0.0
    rank: int = 0  # 1-based, assigned after sort and truncation
    breakdown: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the dataset's camelCase field names."""
        row = self.season.model_dump(by_alias=True)
        row['fantasyPoints'] = self.fantasy_points
        row['rank'] = self.rank
        return row
