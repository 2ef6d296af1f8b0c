"""Constants and mappings for Fantasy MVP."""

from pathlib import Path

# Season range covered by the shipped dataset
FIRST_SEASON = 1970
LATEST_SEASON = 2024

# Top-N cutoff for the ranked view
MAX_RESULTS = 500

# Skill positions kept during ingestion
POSITIONS = ('QB', 'RB', 'WR', 'TE')
ALL_POSITIONS = 'All'
POSITION_FILTERS = (ALL_POSITIONS, *POSITIONS)

# Default scoring rules (JSON field name -> value)
DEFAULT_SCORING = {
    'passingYardsPerPoint': 25.0,
    'passingTD': 4.0,
    'interception': -2.0,
    'rushingYardsPerPoint': 10.0,
    'rushingTD': 6.0,
    'rushingCarry': 0.0,
    'receivingYardsPerPoint': 10.0,
    'receivingTD': 6.0,
    'reception': 0.0,  # 0 = standard, 0.5 = half-PPR, 1 = full PPR
    'fumbleLost': -2.0,
}

# Named presets applied as partial updates over the current config
SCORING_PRESETS = {
    'standard': {'reception': 0},
    'half_ppr': {'reception': 0.5},
    'ppr': {'reception': 1},
}

# Relative and decade year filters (value, label), newest first
LAST_35_YEARS = 'Last35'
LAST_55_YEARS = 'Last55'
YEAR_FILTERS = [
    (LAST_55_YEARS, 'All 55 Years'),
    (LAST_35_YEARS, 'Last 35 Years'),
    ('2020s', "2020's"),
    ('2010s', "2010's"),
    ('2000s', "2000's"),
    ('1990s', "1990's"),
    ('1980s', "1980's"),
    ('1970s', "1970's"),
]
LAST_35_WINDOW = 35

DEFAULT_POSITION_FILTER = ALL_POSITIONS
DEFAULT_YEAR_FILTER = LAST_35_YEARS

# Source CSV column -> dataset JSON field
CSV_COLUMN_MAP = {
    'Player': 'player',
    'Tm': 'team',
    'Pos': 'position',
    'Age': 'age',
    'G': 'games',
    'GS': 'gamesStarted',
    'Year': 'year',
    'Pass_Cmp': 'passCmp',
    'Pass_Att': 'passAtt',
    'Pass_Yds': 'passYds',
    'Pass_TD': 'passTD',
    'Pass_Int': 'passInt',
    'Rush_Att': 'rushAtt',
    'Rush_Yds': 'rushYds',
    'Rush_TD': 'rushTD',
    'Rec_Tgt': 'recTgt',
    'Rec_Rec': 'rec',
    'Rec_Yds': 'recYds',
    'Rec_TD': 'recTD',
    'Fmb': 'fmb',
    'FmbLost': 'fmbLost',
}
TEXT_FIELDS = ('player', 'team', 'position')

# Paths
PROJECT_DIR = Path(__file__).parent.parent
DATA_DIR = PROJECT_DIR / 'data'
DEFAULT_DATA_PATH = DATA_DIR / 'fantasy_data.json'
DEFAULT_SETTINGS_PATH = Path.home() / '.fantasy_mvp' / 'settings.json'
