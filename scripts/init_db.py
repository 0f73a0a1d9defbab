from __future__ import annotations

import argparse
import importlib

from dotenv import load_dotenv

from geo_attendance.config import get_settings_module
from geo_attendance.database.bootstrap import apply_schema, ensure_demo_subjects, list_tables
from geo_attendance.database.connection import DBConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the geo-attendance tables.")
    parser.add_argument("--seed", action="store_true", help="also insert demo subjects")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(settings.DB_CONFIG)

    apply_schema(config)
    if args.seed:
        ensure_demo_subjects(config)

    tables = list_tables(config)
    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
