"""Load the award-nomination list from its semicolon-delimited CSV.

Expected header: ``year;title;studios;producers;winner``. The ``winner``
column is ``yes`` for winners and blank otherwise.
"""

import csv
import io
import logging
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.movies import MovieCreate
from app.services.movie_service import create_movies

logger = logging.getLogger(__name__)

CSV_DELIMITER = ";"
REQUIRED_COLUMNS = ("year", "title", "studios", "producers", "winner")


def _clean(value: str | None) -> str:
    return (value or "").strip()


def parse_movie_csv(content: str) -> list[MovieCreate]:
    """Parse CSV text into movie rows.

    Args:
        content: Full CSV text including the header row

    Returns:
        One MovieCreate per non-blank data line

    Raises:
        ValueError: If a column is missing or a year is not an integer
    """
    reader = csv.DictReader(io.StringIO(content), delimiter=CSV_DELIMITER)
    header = [_clean(name).lower() for name in (reader.fieldnames or [])]
    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise ValueError(f"CSV is missing columns: {', '.join(missing)}")
    reader.fieldnames = header

    rows: list[MovieCreate] = []
    for raw in reader:
        cells = {key: _clean(value) for key, value in raw.items() if key}
        if not any(cells.values()):
            continue
        try:
            year = int(cells["year"])
        except ValueError as exc:
            raise ValueError(
                f"Invalid year {cells['year']!r} on line {reader.line_num}"
            ) from exc
        rows.append(
            MovieCreate(
                year=year,
                title=cells["title"],
                studios=cells["studios"],
                producers=cells["producers"],
                winner=cells["winner"].lower() == "yes",
            )
        )
    return rows


async def load_movies_from_string(db: AsyncSession, content: str) -> int:
    """Parse CSV text and insert every row in one transaction."""
    rows = parse_movie_csv(content)
    inserted = await create_movies(db, rows)
    logger.info("Loaded %d movies (%d winners)", inserted, sum(r.winner for r in rows))
    return inserted


async def load_movies_from_csv(db: AsyncSession, path: str | Path) -> int:
    """Read a CSV file and insert its rows.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    csv_path = Path(path)
    logger.info("Loading movies from %s", csv_path)
    content = csv_path.read_text(encoding="utf-8-sig")
    return await load_movies_from_string(db, content)
