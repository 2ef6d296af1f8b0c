"""Offline conversion of the source stats CSV into the runtime JSON dataset."""

import logging
from pathlib import Path

import polars as pl

from .constants import CSV_COLUMN_MAP, POSITIONS, TEXT_FIELDS
from .utils import save_json

logger = logging.getLogger('fantasy_mvp.ingest')

NUMERIC_FIELDS = [name for name in CSV_COLUMN_MAP.values() if name not in TEXT_FIELDS]


def _numeric(name: str) -> pl.Expr:
    # Blank, unparseable, NaN and infinite cells all become 0
    value = pl.col(name).cast(pl.Float64, strict=False)
    return pl.when(value.is_finite()).then(value).otherwise(0.0).round(1).alias(name)


def read_source_csv(csv_path: Path | str) -> pl.DataFrame:
    """Read the source CSV with every column as text."""
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f'CSV file not found: {csv_path}')
    return pl.read_csv(csv_path, infer_schema_length=0)


def transform(raw: pl.DataFrame) -> pl.DataFrame:
    """
    Clean the raw CSV frame into dataset records.

    - Keeps QB, RB, WR, TE rows
    - Renames columns to the dataset's camelCase names
    - Parses numbers (blank or unparseable -> 0), rounds to one decimal
    - Orders by year (newest first), then a rough standard-scoring estimate
    """
    missing = [col for col in CSV_COLUMN_MAP if col not in raw.columns]
    if missing:
        raise ValueError(f'CSV is missing columns: {", ".join(missing)}')

    frame = (
        raw.filter(pl.col('Pos').is_in(list(POSITIONS)))
        .select([pl.col(src).alias(dst) for src, dst in CSV_COLUMN_MAP.items()])
        .with_columns([_numeric(name) for name in NUMERIC_FIELDS])
        .with_columns(pl.col('year').cast(pl.Int64))
    )

    estimate = (
        pl.col('passYds') / 25
        + pl.col('passTD') * 4
        + pl.col('rushYds') / 10
        + pl.col('rushTD') * 6
        + pl.col('recYds') / 10
        + pl.col('recTD') * 6
    )
    return (
        frame.with_columns(estimate.alias('_estimate'))
        .sort(['year', '_estimate'], descending=[True, True], maintain_order=True)
        .drop('_estimate')
    )


def to_records(frame: pl.DataFrame) -> list[dict]:
    """Rows as dicts, whole-number floats written as ints."""
    records = frame.to_dicts()
    for record in records:
        for name in NUMERIC_FIELDS:
            value = record[name]
            if isinstance(value, float) and value.is_integer():
                record[name] = int(value)
    return records


def convert_csv(csv_path: Path | str, json_path: Path | str) -> int:
    """
    Convert the source CSV into fantasy_data.json.

    Returns:
        Number of player-seasons written
    """
    logger.info(f'Reading CSV file {csv_path}')
    raw = read_source_csv(csv_path)
    logger.info(f'Parsed {raw.height} rows')

    records = to_records(transform(raw))
    save_json(json_path, records, indent=None)

    size_mb = Path(json_path).stat().st_size / 1024 / 1024
    logger.info(f'Wrote {len(records)} player-seasons to {json_path} ({size_mb:.2f} MB)')
    if records:
        years = sorted({record['year'] for record in records})
        logger.info(f'Year range: {years[0]} - {years[-1]}')

    return len(records)
