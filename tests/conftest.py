"""Shared fixtures for Fantasy MVP tests."""

import pytest

from fantasy_mvp.schemas import PlayerSeason


def build_player(**overrides) -> PlayerSeason:
    """A player-season with all-zero stats, overridable by attribute name."""
    fields = {
        'player': 'Test Player',
        'team': 'TST',
        'position': 'QB',
        'age': 25,
        'games': 16,
        'games_started': 16,
        'year': 2023,
        'pass_cmp': 0,
        'pass_att': 0,
        'pass_yds': 0,
        'pass_td': 0,
        'pass_int': 0,
        'rush_att': 0,
        'rush_yds': 0,
        'rush_td': 0,
        'rec_tgt': 0,
        'rec': 0,
        'rec_yds': 0,
        'rec_td': 0,
        'fmb': 0,
        'fmb_lost': 0,
    }
    fields.update(overrides)
    return PlayerSeason(**fields)


@pytest.fixture
def make_player():
    return build_player


@pytest.fixture
def sample_records():
    """Small mixed dataset in dataset order."""
    return [
        build_player(player='Peyton Manning', team='DEN', position='QB', year=2013,
                     pass_yds=5477, pass_td=55, pass_int=10, rush_yds=-31, fmb_lost=6),
        build_player(player='LaDainian Tomlinson', team='SDG', position='RB', year=2006,
                     rush_att=348, rush_yds=1815, rush_td=28, rec=56, rec_yds=508, rec_td=3, fmb_lost=1),
        build_player(player='Jerry Rice', team='SFO', position='WR', year=1995,
                     rec=122, rec_yds=1848, rec_td=15, rush_yds=36, rush_td=1),
        build_player(player='Rob Gronkowski', team='NWE', position='TE', year=2011,
                     rec=90, rec_yds=1327, rec_td=17, rush_td=1),
        build_player(player='Eric Dickerson', team='RAM', position='RB', year=1984,
                     rush_att=379, rush_yds=2105, rush_td=14, rec=21, rec_yds=139, fmb_lost=8),
        build_player(player='Dan Marino', team='MIA', position='QB', year=1989,
                     pass_yds=3997, pass_td=24, pass_int=22),
        build_player(player='Barry Sanders', team='DET', position='RB', year=1990,
                     rush_yds=1304, rush_td=13, rec=36, rec_yds=480, rec_td=3, fmb_lost=4),
        build_player(player='Backup QB', team='TST', position='QB', year=2024,
                     pass_yds=100, pass_int=5),
    ]
