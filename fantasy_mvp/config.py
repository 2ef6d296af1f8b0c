"""Scoring configuration and persisted user settings."""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .constants import DEFAULT_POSITION_FILTER, DEFAULT_YEAR_FILTER, SCORING_PRESETS
from .filters import YearFilter, parse_position_filter, parse_year_filter
from .schemas import PersistedState, ScoringConfig
from .utils import load_json_safe, save_json

logger = logging.getLogger('fantasy_mvp.config')

# Accept both JSON names (passingTD) and attribute names (passing_td)
CONFIG_FIELD_NAMES = {
    **{name: name for name in ScoringConfig.model_fields},
    **{info.alias: name for name, info in ScoringConfig.model_fields.items() if info.alias},
}


class ConfigValidationError(ValueError):
    """Raised when a scoring update is rejected. The previous config is kept."""


class ScoringSettings:
    """
    Holds the active scoring configuration.

    Updates are all-or-nothing: a rejected update leaves the current
    configuration untouched.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self._config = config or ScoringConfig()

    def get(self) -> ScoringConfig:
        """Return the current configuration."""
        return self._config

    def set(self, partial: Mapping[str, Any] | ScoringConfig) -> ScoringConfig:
        """
        Merge the provided fields over the current configuration.

        Args:
            partial: Field -> value mapping (JSON or attribute names), or a
                full ScoringConfig to replace the current one wholesale

        Returns:
            The new configuration

        Raises:
            ConfigValidationError: Unknown field, zero yards-per-point, or a
                non-numeric / non-finite value
        """
        if isinstance(partial, ScoringConfig):
            partial = partial.model_dump()

        updates = {}
        for key, value in partial.items():
            if key not in CONFIG_FIELD_NAMES:
                raise ConfigValidationError(f'Unknown scoring field: {key}')
            updates[CONFIG_FIELD_NAMES[key]] = value

        merged = {**self._config.model_dump(), **updates}
        try:
            new_config = ScoringConfig(**merged)
        except ValidationError as e:
            logger.warning(f'Rejected scoring update {dict(partial)}: {e}')
            raise ConfigValidationError(f'Invalid scoring update: {e}') from e

        self._config = new_config
        logger.debug(f'Scoring config updated: {updates}')
        return new_config

    def reset(self) -> ScoringConfig:
        """Restore the default scoring rules."""
        self._config = ScoringConfig()
        return self._config

    def apply_preset(self, name: str) -> ScoringConfig:
        """Apply a named preset ('standard', 'half_ppr', 'ppr') as a partial update."""
        if name not in SCORING_PRESETS:
            raise ConfigValidationError(
                f'Unknown scoring preset: {name} (expected one of {", ".join(SCORING_PRESETS)})'
            )
        return self.set(SCORING_PRESETS[name])


class FantasyState:
    """
    User-facing state: scoring rules plus the active filters.

    Passed explicitly to whatever needs it. When a settings path is given,
    every change made through the setters is written back to it.
    """

    def __init__(
        self,
        scoring: Optional[ScoringSettings] = None,
        position_filter: str = DEFAULT_POSITION_FILTER,
        year_filter: YearFilter = DEFAULT_YEAR_FILTER,
        settings_path: Optional[Path] = None,
    ):
        self.scoring = scoring or ScoringSettings()
        self.position_filter = parse_position_filter(position_filter)
        self.year_filter = parse_year_filter(year_filter)
        self.settings_path = Path(settings_path) if settings_path else None

    @property
    def scoring_config(self) -> ScoringConfig:
        return self.scoring.get()

    def set_position_filter(self, value: str) -> None:
        self.position_filter = parse_position_filter(value)
        self.save()

    def set_year_filter(self, value: YearFilter) -> None:
        self.year_filter = parse_year_filter(value)
        self.save()

    def update_scoring(self, partial: Mapping[str, Any] | ScoringConfig) -> ScoringConfig:
        config = self.scoring.set(partial)
        self.save()
        return config

    def reset_scoring(self) -> ScoringConfig:
        config = self.scoring.reset()
        self.save()
        return config

    def apply_preset(self, name: str) -> ScoringConfig:
        config = self.scoring.apply_preset(name)
        self.save()
        return config

    def to_persisted(self) -> PersistedState:
        return PersistedState(
            scoring_config=self.scoring.get(),
            position_filter=self.position_filter,
            year_filter=self.year_filter,
        )

    def save(self) -> None:
        """Write settings to disk (no-op without a settings path)."""
        if self.settings_path is None:
            return
        save_json(self.settings_path, self.to_persisted())
        logger.debug(f'Saved settings to {self.settings_path}')

    @classmethod
    def load(cls, settings_path: Path | str) -> 'FantasyState':
        """
        Load settings, falling back to defaults entry by entry.

        A missing file gives all defaults. A corrupt entry (bad scoring
        config, unknown filter) is replaced by its default and logged; the
        other entries are kept.
        """
        settings_path = Path(settings_path)
        raw = load_json_safe(settings_path, default={})
        if not isinstance(raw, dict):
            logger.warning(f'Ignoring settings in {settings_path}: expected an object')
            raw = {}

        scoring = ScoringSettings()
        if 'scoringConfig' in raw:
            try:
                scoring.set(raw['scoringConfig'])
            except (ConfigValidationError, AttributeError) as e:
                logger.warning(f'Using default scoring config: {e}')

        position_filter = DEFAULT_POSITION_FILTER
        if 'positionFilter' in raw:
            try:
                position_filter = parse_position_filter(raw['positionFilter'])
            except ValueError as e:
                logger.warning(f'Using default position filter: {e}')

        year_filter: YearFilter = DEFAULT_YEAR_FILTER
        if 'yearFilter' in raw:
            try:
                year_filter = parse_year_filter(raw['yearFilter'])
            except ValueError as e:
                logger.warning(f'Using default year filter: {e}')

        return cls(
            scoring=scoring,
            position_filter=position_filter,
            year_filter=year_filter,
            settings_path=settings_path,
        )
