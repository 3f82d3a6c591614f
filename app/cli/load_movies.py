"""Load a movie-list CSV into the configured database.

Usage:
    python -m app.cli.load_movies --file data/movielist.csv [--replace]

Exit codes:
    0 - Success
    1 - Failure (check logs for details)
"""

import argparse
import asyncio
import logging
import sys

from app.services.movie_ingestion_service import load_movies_from_csv
from app.services.movie_service import count_movies, count_winners, delete_all_movies
from app.utils.db_async import SessionLocal, dispose_engine, init_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("load_movies")


async def main(csv_path: str, replace: bool = False) -> int:
    """Create tables if needed and insert the CSV rows.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        await init_db()
        async with SessionLocal() as db:
            if replace:
                logger.info("Clearing existing movies")
                await delete_all_movies(db)
            inserted = await load_movies_from_csv(db, csv_path)
            total = await count_movies(db)
            winners = await count_winners(db)
        logger.info(
            "Inserted %d rows; catalog now holds %d movies (%d winners)",
            inserted,
            total,
            winners,
        )
        return 0
    except Exception as e:
        logger.error("Loading %s failed: %s", csv_path, e, exc_info=True)
        return 1
    finally:
        await dispose_engine()


def run() -> None:
    parser = argparse.ArgumentParser(description="Load a movie-list CSV into the database")
    parser.add_argument("--file", required=True, type=str, help="Path to the ';'-delimited CSV")
    parser.add_argument(
        "--replace",
        action="store_true",
        help="Delete existing movies before loading",
    )
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.file, replace=args.replace)))


if __name__ == "__main__":
    run()
