#!/usr/bin/env python3
"""Convert the source stats CSV into data/fantasy_data.json.

Usage:
    python scripts/process_data.py
    python scripts/process_data.py --input fantasy_data.csv --output data/fantasy_data.json
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fantasy_mvp.constants import DEFAULT_DATA_PATH, PROJECT_DIR
from fantasy_mvp.ingest import convert_csv
from fantasy_mvp.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Build the player-season JSON dataset from CSV")
    parser.add_argument(
        "--input", "-i",
        default=str(PROJECT_DIR / "fantasy_data.csv"),
        help="Source CSV file",
    )
    parser.add_argument(
        "--output", "-o",
        default=str(DEFAULT_DATA_PATH),
        help="Destination JSON file",
    )
    args = parser.parse_args()

    setup_logging()

    try:
        count = convert_csv(args.input, args.output)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"Processed {count} player-seasons")


if __name__ == "__main__":
    main()
