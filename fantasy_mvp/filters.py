"""Position and year-range predicates for player-seasons."""

import re
from typing import Callable, Iterable, List, Optional, Union

from .constants import (
    ALL_POSITIONS,
    LAST_35_WINDOW,
    LAST_35_YEARS,
    LAST_55_YEARS,
    LATEST_SEASON,
    POSITIONS,
)
from .schemas import PlayerSeason

YearFilter = Union[str, int]
Predicate = Callable[[PlayerSeason], bool]

DECADE_PATTERN = re.compile(r'^(\d{3}0)s$')


def parse_position_filter(value: str) -> str:
    """Normalize a position filter ('all', 'qb', ...) to 'All' or a position code."""
    text = str(value).strip()
    if text.lower() == ALL_POSITIONS.lower():
        return ALL_POSITIONS
    if text.upper() in POSITIONS:
        return text.upper()
    raise ValueError(f'Invalid position filter: {value}')


def parse_year_filter(value: YearFilter) -> YearFilter:
    """
    Normalize a year filter.

    Accepts 'Last55', 'Last35', a decade bucket like '1990s', or a single
    year as an int or numeric string.

    Raises:
        ValueError: If the value is not a recognized filter
    """
    if isinstance(value, bool):
        raise ValueError(f'Invalid year filter: {value}')
    if isinstance(value, int):
        return value

    text = str(value).strip()
    for relative in (LAST_35_YEARS, LAST_55_YEARS):
        if text.lower() == relative.lower():
            return relative
    if DECADE_PATTERN.match(text):
        return text
    if text.isdigit():
        return int(text)
    raise ValueError(f'Invalid year filter: {value}')


def position_predicate(position_filter: str) -> Predicate:
    """Exact position match, or pass-through for 'All'."""
    if position_filter == ALL_POSITIONS:
        return lambda record: True
    return lambda record: record.position == position_filter


def year_predicate(year_filter: YearFilter, reference_year: int = LATEST_SEASON) -> Predicate:
    """
    Build the year-range predicate for a filter.

    Args:
        year_filter: Normalized year filter (see parse_year_filter)
        reference_year: Latest season in the dataset, anchor for relative filters
    """
    if isinstance(year_filter, int):
        return lambda record: record.year == year_filter

    if year_filter == LAST_55_YEARS:
        return lambda record: True

    if year_filter == LAST_35_YEARS:
        cutoff = reference_year - LAST_35_WINDOW
        return lambda record: record.year > cutoff

    match = DECADE_PATTERN.match(year_filter)
    if match:
        start = int(match.group(1))
        end = min(start + 9, reference_year)
        return lambda record: start <= record.year <= end

    raise ValueError(f'Invalid year filter: {year_filter}')


def filter_by_position(records: Iterable[PlayerSeason], position_filter: str) -> List[PlayerSeason]:
    """Keep records matching the position filter."""
    matches = position_predicate(position_filter)
    return [record for record in records if matches(record)]


def filter_by_year_range(
    records: Iterable[PlayerSeason],
    year_filter: YearFilter,
    reference_year: Optional[int] = None,
) -> List[PlayerSeason]:
    """Keep records inside the year filter's range."""
    records = list(records)
    if reference_year is None:
        reference_year = latest_year(records)
    matches = year_predicate(year_filter, reference_year)
    return [record for record in records if matches(record)]


def latest_year(records: Iterable[PlayerSeason]) -> int:
    """Most recent season in the records, or LATEST_SEASON when empty."""
    return max((record.year for record in records), default=LATEST_SEASON)
