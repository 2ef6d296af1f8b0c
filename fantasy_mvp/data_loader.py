"""Loading the player-season dataset from a file or URL."""

import json
import logging
from pathlib import Path
from typing import List

import requests

from .schemas import PlayerSeason, PlayerSeasonsFile
from .utils import load_json, validate_data

logger = logging.getLogger('fantasy_mvp.data_loader')

REQUEST_TIMEOUT = 30


class DataLoadError(RuntimeError):
    """Raised when the dataset cannot be fetched, parsed, or validated."""


def is_url(source: str | Path) -> bool:
    return str(source).startswith(('http://', 'https://'))


def fetch_json(url: str, timeout: float = REQUEST_TIMEOUT):
    """GET a JSON document."""
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.json()


def load_player_seasons(source: str | Path, timeout: float = REQUEST_TIMEOUT) -> List[PlayerSeason]:
    """
    Load the dataset (a JSON array of player-season objects).

    Args:
        source: Local path or http(s) URL of fantasy_data.json
        timeout: HTTP timeout in seconds (URLs only)

    Returns:
        Player-seasons in dataset order

    Raises:
        DataLoadError: If the document is missing, unreachable, malformed,
            or any record fails validation
    """
    logger.info(f'Loading player seasons from {source}')
    try:
        if is_url(source):
            data = fetch_json(str(source), timeout=timeout)
            seasons = validate_data(data, PlayerSeasonsFile, str(source))
        else:
            seasons = load_json(source, schema=PlayerSeasonsFile)
    except (requests.RequestException, OSError, json.JSONDecodeError, ValueError) as e:
        logger.error(f'Failed to load data from {source}: {e}')
        raise DataLoadError(f'Failed to load data from {source}: {e}') from e

    records = seasons.root
    logger.info(f'Loaded {len(records)} player seasons')
    return records
