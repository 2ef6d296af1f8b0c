"""Utility functions for JSON file I/O."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('fantasy_mvp.utils')


def validate_data(data: Any, schema: type[T], source: str) -> T:
    """
    Validate already-parsed JSON against a Pydantic model.

    Raises:
        ValueError: If schema validation fails
    """
    try:
        validated = schema(**data) if isinstance(data, dict) else schema(data)  # type: ignore[call-arg]
        logger.debug(f'Schema validation passed for: {source}')
        return validated
    except ValidationError as e:
        logger.error(f'Schema validation failed for {source}: {e}')
        raise ValueError(f'Schema validation failed for {source}:\n{e}') from e


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load JSON file with optional schema validation.

    Args:
        path: Path to JSON file (str or Path object)
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (validated if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from fantasy_mvp.schemas import PlayerSeasonsFile
        seasons = load_json('data/fantasy_data.json', schema=PlayerSeasonsFile)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        logger.debug(f'Successfully loaded JSON from: {path}')
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema:
        return validate_data(data, schema, str(path))

    return data


def save_json(
    path: Path | str,
    data: Any,
    indent: int | None = 2,
    create_dirs: bool = True,
) -> None:
    """
    Save data as JSON file.

    Args:
        path: Path to write to (str or Path object)
        data: Data to serialize (JSON-serializable or Pydantic model)
        indent: Indentation level (None for compact output)
        create_dirs: Create parent directories if they don't exist

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)

    logger.debug(f'Saving JSON to: {path}')

    if create_dirs:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f'Failed to create directory {path.parent}: {e}')
            raise

    # Pydantic models are written with their JSON (alias) field names
    json_data = data.model_dump(by_alias=True) if isinstance(data, BaseModel) else data

    separators = (',', ':') if indent is None else None
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, separators=separators, ensure_ascii=False)
        logger.debug(f'Successfully saved JSON to: {path}')
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        raise


def load_json_safe(
    path: Path | str,
    default: Any = None,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load JSON file with safe fallback to default value.

    Like load_json, but returns default value instead of raising
    exceptions for missing or invalid files.

    Example:
        # Returns empty dict if file doesn't exist
        data = load_json_safe('settings.json', default={})
    """
    try:
        return load_json(path, schema=schema)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        logger.warning(f'Falling back to default for {path}: {e}')
        return default
