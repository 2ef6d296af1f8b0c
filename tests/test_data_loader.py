"""Tests for loading the player-season dataset."""

import json
from unittest.mock import Mock, patch

import pytest
import requests
from pydantic import ValidationError

from fantasy_mvp.data_loader import DataLoadError, load_player_seasons

RECORD = {
    'player': 'Jerry Rice',
    'team': 'SFO',
    'position': 'WR',
    'age': 33,
    'games': 16,
    'gamesStarted': 16,
    'year': 1995,
    'passCmp': 1,
    'passAtt': 1,
    'passYds': 41,
    'passTD': 1,
    'passInt': 0,
    'rushAtt': 5,
    'rushYds': 36,
    'rushTD': 1,
    'recTgt': 0,
    'rec': 122,
    'recYds': 1848,
    'recTD': 15,
    'fmb': 3,
    'fmbLost': 2,
}


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / 'fantasy_data.json'
    path.write_text(json.dumps([RECORD, {**RECORD, 'player': 'Steve Young', 'position': 'QB'}]))
    return path


class TestLoadFromFile:
    def test_loads_records_in_order(self, data_file):
        records = load_player_seasons(data_file)
        assert [r.player for r in records] == ['Jerry Rice', 'Steve Young']
        assert records[0].rec_yds == 1848
        assert records[0].games_started == 16
        assert records[0].fmb_lost == 2

    def test_records_are_immutable(self, data_file):
        record = load_player_seasons(data_file)[0]
        with pytest.raises(ValidationError):
            record.rec_yds = 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match='File not found'):
            load_player_seasons(tmp_path / 'missing.json')

    def test_malformed_json(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text('[{"player": ')
        with pytest.raises(DataLoadError):
            load_player_seasons(path)

    def test_invalid_position(self, tmp_path):
        path = tmp_path / 'kicker.json'
        path.write_text(json.dumps([{**RECORD, 'position': 'K'}]))
        with pytest.raises(DataLoadError, match='Schema validation failed'):
            load_player_seasons(path)

    def test_non_numeric_stat(self, tmp_path):
        path = tmp_path / 'bad_stat.json'
        path.write_text(json.dumps([{**RECORD, 'recYds': 'lots'}]))
        with pytest.raises(DataLoadError):
            load_player_seasons(path)

    def test_nan_stat_rejected(self, tmp_path):
        path = tmp_path / 'nan.json'
        path.write_text(json.dumps([{**RECORD, 'passYds': float('nan')}]))
        assert 'NaN' in path.read_text()
        with pytest.raises(DataLoadError, match='Schema validation failed'):
            load_player_seasons(path)

    def test_infinite_stat_rejected(self, tmp_path):
        path = tmp_path / 'inf.json'
        path.write_text(json.dumps([{**RECORD, 'rushYds': float('inf')}]))
        with pytest.raises(DataLoadError):
            load_player_seasons(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(DataLoadError, match='Failed to load data'):
            load_player_seasons(tmp_path)

    def test_empty_dataset(self, tmp_path):
        path = tmp_path / 'empty.json'
        path.write_text('[]')
        assert load_player_seasons(path) == []


class TestLoadFromUrl:
    @patch('fantasy_mvp.data_loader.requests.get')
    def test_fetches_url(self, mock_get):
        response = Mock()
        response.json.return_value = [RECORD]
        mock_get.return_value = response

        records = load_player_seasons('https://example.com/data/fantasy_data.json', timeout=5)

        mock_get.assert_called_once_with('https://example.com/data/fantasy_data.json', timeout=5)
        response.raise_for_status.assert_called_once()
        assert records[0].player == 'Jerry Rice'

    @patch('fantasy_mvp.data_loader.requests.get')
    def test_http_error(self, mock_get):
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError('404 Client Error')
        mock_get.return_value = response

        with pytest.raises(DataLoadError, match='404'):
            load_player_seasons('https://example.com/missing.json')

    @patch('fantasy_mvp.data_loader.requests.get')
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError('unreachable')
        with pytest.raises(DataLoadError, match='unreachable'):
            load_player_seasons('http://example.com/data.json')
