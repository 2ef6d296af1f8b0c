"""Unit tests for scoring settings and persisted state."""

import json
import math

import pytest

from fantasy_mvp.config import ConfigValidationError, FantasyState, ScoringSettings
from fantasy_mvp.constants import DEFAULT_SCORING
from fantasy_mvp.schemas import ScoringConfig


class TestScoringConfigSchema:
    def test_defaults(self):
        """Standard, non-PPR defaults."""
        assert ScoringConfig().model_dump(by_alias=True) == DEFAULT_SCORING

    def test_zero_yards_per_point_rejected(self):
        with pytest.raises(ValueError, match='cannot be zero'):
            ScoringConfig(rushing_yards_per_point=0)

    def test_negative_and_fractional_values_allowed(self):
        config = ScoringConfig(interception=-3.5, reception=0.5, passing_yards_per_point=-20)
        assert config.interception == -3.5
        assert config.reception == 0.5

    def test_infinite_value_rejected(self):
        with pytest.raises(ValueError, match='finite'):
            ScoringConfig(passing_td=math.inf)

    def test_accepts_json_names(self):
        config = ScoringConfig(**{'passingTD': 6, 'fumbleLost': -1})
        assert config.passing_td == 6
        assert config.fumble_lost == -1


class TestScoringSettings:
    """Tests for get / set / reset."""

    def test_get_returns_defaults(self):
        assert ScoringSettings().get() == ScoringConfig()

    def test_set_merges_partial(self):
        settings = ScoringSettings()
        settings.set({'reception': 1})
        config = settings.get()
        assert config.reception == 1
        assert config.passing_td == DEFAULT_SCORING['passingTD']
        assert config.rushing_yards_per_point == DEFAULT_SCORING['rushingYardsPerPoint']

    def test_set_accepts_both_name_styles(self):
        settings = ScoringSettings()
        settings.set({'passingTD': 6, 'rushing_carry': 0.1})
        assert settings.get().passing_td == 6
        assert settings.get().rushing_carry == 0.1

    def test_set_round_trip(self):
        """Fields not in the update keep their previous values."""
        settings = ScoringSettings()
        settings.set({'interception': -1})
        before = settings.get().model_dump()
        settings.set({'reception': 0.5, 'receivingTD': 4})
        after = settings.get().model_dump()
        assert after['reception'] == 0.5
        assert after['receiving_td'] == 4
        for key in before:
            if key not in ('reception', 'receiving_td'):
                assert after[key] == before[key]
        assert after['interception'] == -1

    def test_set_wholesale(self):
        settings = ScoringSettings()
        replacement = ScoringConfig(passing_td=6, reception=1)
        assert settings.set(replacement) == replacement

    def test_zero_divisor_rejected_and_previous_kept(self):
        settings = ScoringSettings()
        settings.set({'passingYardsPerPoint': 20})
        with pytest.raises(ConfigValidationError):
            settings.set({'passingYardsPerPoint': 0, 'reception': 1})
        assert settings.get().passing_yards_per_point == 20
        assert settings.get().reception == 0

    def test_unknown_field_rejected(self):
        settings = ScoringSettings()
        with pytest.raises(ConfigValidationError, match='Unknown scoring field'):
            settings.set({'sacks': 1})
        assert settings.get() == ScoringConfig()

    def test_non_numeric_value_rejected(self):
        settings = ScoringSettings()
        with pytest.raises(ConfigValidationError):
            settings.set({'reception': 'lots'})

    def test_reset_restores_defaults(self):
        settings = ScoringSettings()
        settings.set({'reception': 1, 'passingTD': 6})
        settings.set({'fumbleLost': 0, 'rushingYardsPerPoint': 5})
        settings.reset()
        assert settings.get().model_dump(by_alias=True) == DEFAULT_SCORING
        assert settings.reset() == ScoringConfig()

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigValidationError, ValueError)

    @pytest.mark.parametrize('preset, reception', [('standard', 0), ('half_ppr', 0.5), ('ppr', 1)])
    def test_presets(self, preset, reception):
        settings = ScoringSettings()
        settings.set({'passingTD': 6})
        settings.apply_preset(preset)
        assert settings.get().reception == reception
        assert settings.get().passing_td == 6

    def test_unknown_preset(self):
        with pytest.raises(ConfigValidationError, match='Unknown scoring preset'):
            ScoringSettings().apply_preset('superflex')


class TestFantasyState:
    """Tests for the persisted settings container."""

    def test_defaults(self):
        state = FantasyState()
        assert state.position_filter == 'All'
        assert state.year_filter == 'Last35'
        assert state.scoring_config == ScoringConfig()

    def test_no_settings_path_is_in_memory(self, tmp_path):
        state = FantasyState()
        state.set_position_filter('WR')
        assert state.position_filter == 'WR'
        assert list(tmp_path.iterdir()) == []

    def test_changes_are_written(self, tmp_path):
        path = tmp_path / 'settings.json'
        state = FantasyState(settings_path=path)
        state.set_position_filter('rb')
        state.set_year_filter('1990s')
        state.update_scoring({'reception': 0.5})

        with open(path) as f:
            saved = json.load(f)
        assert saved['positionFilter'] == 'RB'
        assert saved['yearFilter'] == '1990s'
        assert saved['scoringConfig']['reception'] == 0.5
        assert saved['scoringConfig']['passingYardsPerPoint'] == 25

    def test_save_load_round_trip(self, tmp_path):
        path = tmp_path / 'settings.json'
        state = FantasyState(settings_path=path)
        state.update_scoring({'passingTD': 6, 'interception': -1})
        state.set_year_filter(2007)
        state.set_position_filter('QB')

        loaded = FantasyState.load(path)
        assert loaded.scoring_config == state.scoring_config
        assert loaded.year_filter == 2007
        assert loaded.position_filter == 'QB'

    def test_reset_is_persisted(self, tmp_path):
        path = tmp_path / 'settings.json'
        state = FantasyState(settings_path=path)
        state.apply_preset('ppr')
        state.reset_scoring()
        assert FantasyState.load(path).scoring_config == ScoringConfig()

    def test_rejected_update_not_written(self, tmp_path):
        path = tmp_path / 'settings.json'
        state = FantasyState(settings_path=path)
        state.update_scoring({'reception': 1})
        with pytest.raises(ConfigValidationError):
            state.update_scoring({'receivingYardsPerPoint': 0})
        assert FantasyState.load(path).scoring_config.receiving_yards_per_point == 10

    def test_missing_file_gives_defaults(self, tmp_path):
        state = FantasyState.load(tmp_path / 'nope.json')
        assert state.position_filter == 'All'
        assert state.year_filter == 'Last35'
        assert state.scoring_config == ScoringConfig()

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text('{not json')
        state = FantasyState.load(path)
        assert state.scoring_config == ScoringConfig()

    def test_corrupt_entries_fall_back_individually(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({
            'scoringConfig': {'passingYardsPerPoint': 0},
            'positionFilter': 'K',
            'yearFilter': '1995',
        }))
        state = FantasyState.load(path)
        assert state.scoring_config == ScoringConfig()
        assert state.position_filter == 'All'
        assert state.year_filter == 1995

    def test_partial_scoring_config_merges_over_defaults(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({'scoringConfig': {'reception': 1}}))
        state = FantasyState.load(path)
        assert state.scoring_config.reception == 1
        assert state.scoring_config.passing_td == 4

    def test_non_object_file(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text('[1, 2, 3]')
        assert FantasyState.load(path).position_filter == 'All'

    def test_invalid_filter_on_construct(self):
        with pytest.raises(ValueError):
            FantasyState(position_filter='OL')
