"""Pydantic schemas for the dataset, scoring rules, and persisted settings."""

import math

from pydantic import BaseModel, Field, RootModel, field_validator

from .constants import DEFAULT_POSITION_FILTER, DEFAULT_SCORING, DEFAULT_YEAR_FILTER


class PlayerSeason(BaseModel):
    """One player's counting stats for one season."""

    player: str
    team: str
    position: str = Field(..., pattern=r'^(QB|RB|WR|TE)$')
    age: float = 0
    games: float = 0
    games_started: float = Field(0, alias='gamesStarted')
    year: int

    # Passing
    pass_cmp: float = Field(0, alias='passCmp')
    pass_att: float = Field(0, alias='passAtt')
    pass_yds: float = Field(0, alias='passYds')
    pass_td: float = Field(0, alias='passTD')
    pass_int: float = Field(0, alias='passInt')

    # Rushing
    rush_att: float = Field(0, alias='rushAtt')
    rush_yds: float = Field(0, alias='rushYds')
    rush_td: float = Field(0, alias='rushTD')

    # Receiving
    rec_tgt: float = Field(0, alias='recTgt')
    rec: float = 0
    rec_yds: float = Field(0, alias='recYds')
    rec_td: float = Field(0, alias='recTD')

    # Fumbles
    fmb: float = 0
    fmb_lost: float = Field(0, alias='fmbLost')

    class Config:
        frozen = True
        populate_by_name = True
        extra = 'ignore'
        allow_inf_nan = False


class PlayerSeasonsFile(RootModel[list[PlayerSeason]]):
    """Complete fantasy_data.json file structure."""


YARDS_PER_POINT_FIELDS = (
    'passing_yards_per_point',
    'rushing_yards_per_point',
    'receiving_yards_per_point',
)


class ScoringConfig(BaseModel):
    """Fantasy scoring rules. Every coefficient is independently configurable."""

    # Passing
    passing_yards_per_point: float = Field(
        DEFAULT_SCORING['passingYardsPerPoint'], alias='passingYardsPerPoint'
    )
    passing_td: float = Field(DEFAULT_SCORING['passingTD'], alias='passingTD')
    interception: float = DEFAULT_SCORING['interception']

    # Rushing
    rushing_yards_per_point: float = Field(
        DEFAULT_SCORING['rushingYardsPerPoint'], alias='rushingYardsPerPoint'
    )
    rushing_td: float = Field(DEFAULT_SCORING['rushingTD'], alias='rushingTD')
    rushing_carry: float = Field(DEFAULT_SCORING['rushingCarry'], alias='rushingCarry')

    # Receiving
    receiving_yards_per_point: float = Field(
        DEFAULT_SCORING['receivingYardsPerPoint'], alias='receivingYardsPerPoint'
    )
    receiving_td: float = Field(DEFAULT_SCORING['receivingTD'], alias='receivingTD')
    reception: float = DEFAULT_SCORING['reception']

    # Fumbles
    fumble_lost: float = Field(DEFAULT_SCORING['fumbleLost'], alias='fumbleLost')

    @field_validator('*')
    @classmethod
    def validate_finite(cls, v):
        """Reject NaN and infinite coefficients."""
        if not math.isfinite(v):
            raise ValueError(f'Scoring coefficient must be finite, got {v}')
        return v

    @field_validator(*YARDS_PER_POINT_FIELDS)
    @classmethod
    def validate_yards_per_point(cls, v):
        """Yards-per-point values are divisors and cannot be zero."""
        if v == 0:
            raise ValueError('Yards per point cannot be zero')
        return v

    class Config:
        frozen = True
        populate_by_name = True
        extra = 'forbid'


class PersistedState(BaseModel):
    """Complete settings.json file structure."""

    scoring_config: ScoringConfig = Field(default_factory=ScoringConfig, alias='scoringConfig')
    position_filter: str = Field(DEFAULT_POSITION_FILTER, alias='positionFilter')
    year_filter: str | int = Field(DEFAULT_YEAR_FILTER, alias='yearFilter')

    class Config:
        populate_by_name = True
        extra = 'ignore'
