"""Column selection and ordering for the ranked table."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .constants import ALL_POSITIONS
from .models import ScoredPlayerSeason


@dataclass(frozen=True)
class Column:
    """A displayable field of a scored player-season."""
    id: str  # JSON field name of the row (see ScoredPlayerSeason.to_dict)
    header: str
    width: int


PREFIX_COLUMNS = [
    Column('rank', '#', 4),
    Column('year', 'Year', 6),
    Column('player', 'Player', 24),
    Column('team', 'Team', 5),
    Column('fantasyPoints', 'Fantasy Pts', 11),
    Column('games', 'G', 4),
]

COLUMN_GROUPS: Dict[str, List[Column]] = {
    'passing': [
        Column('passCmp', 'Cmp', 5),
        Column('passAtt', 'Att', 5),
        Column('passYds', 'Pass Yds', 8),
        Column('passTD', 'Pass TD', 7),
        Column('passInt', 'Int', 4),
    ],
    'rushing': [
        Column('rushAtt', 'Rush Att', 8),
        Column('rushYds', 'Rush Yds', 8),
        Column('rushTD', 'Rush TD', 7),
    ],
    'receiving': [
        Column('recTgt', 'Tgt', 5),
        Column('rec', 'Rec', 5),
        Column('recYds', 'Rec Yds', 8),
        Column('recTD', 'Rec TD', 6),
    ],
    'fumbles': [
        Column('fmbLost', 'Fum Lost', 8),
    ],
}

# Stat groups after the prefix, by position filter; fumbles always close the row
GROUP_ORDER: Dict[str, Tuple[str, ...]] = {
    'QB': ('passing', 'rushing', 'receiving', 'fumbles'),
    'RB': ('rushing', 'receiving', 'passing', 'fumbles'),
    'WR': ('receiving', 'rushing', 'passing', 'fumbles'),
    'TE': ('receiving', 'rushing', 'passing', 'fumbles'),
    ALL_POSITIONS: ('passing', 'rushing', 'receiving', 'fumbles'),
}


def get_column_groups(position_filter: str) -> List[str]:
    """Ordered stat group names shown for a position filter."""
    return list(GROUP_ORDER.get(position_filter, GROUP_ORDER[ALL_POSITIONS]))


def get_columns_for_position(position_filter: str) -> List[Column]:
    """Ordered columns for a position filter: fixed prefix, then stat groups."""
    columns = list(PREFIX_COLUMNS)
    for group in get_column_groups(position_filter):
        columns.extend(COLUMN_GROUPS[group])
    return columns


def format_cell(row: ScoredPlayerSeason | Dict[str, Any], column: Column) -> str:
    """Render one cell. Fantasy points always show one decimal."""
    values = row.to_dict() if isinstance(row, ScoredPlayerSeason) else row
    value = values.get(column.id)
    if value is None:
        return ''
    if column.id == 'fantasyPoints':
        return f'{value:.1f}'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _align(text: str, column: Column) -> str:
    # Player names read left to right, numbers line up on the right
    if column.id == 'player':
        return text[:column.width].ljust(column.width)
    return text.rjust(column.width)


def render_table(rows: List[ScoredPlayerSeason], position_filter: str) -> str:
    """Render the ranked rows as a fixed-width text table."""
    columns = get_columns_for_position(position_filter)
    lines = [
        ' '.join(_align(col.header, col) for col in columns),
        ' '.join('-' * col.width for col in columns),
    ]
    for row in rows:
        values = row.to_dict()
        lines.append(' '.join(_align(format_cell(values, col), col) for col in columns))
    return '\n'.join(lines)
