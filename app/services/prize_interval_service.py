"""Producer award-interval computation.

For every producer with two or more wins, measures the gap in years between
consecutive wins and reports the producers tied at the shortest and the
longest gap.
"""

import logging
import re
from collections.abc import Iterable
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.producers import PrizeIntervalResponse, ProducerInterval
from app.services.movie_service import list_winning_records

logger = logging.getLogger(__name__)

# Credits join names with ", " or " and " (any case). Comma is tried first.
PRODUCER_SEPARATOR = re.compile(r",| and ", re.IGNORECASE)


class WinningRecord(Protocol):
    year: int
    producers: str


def parse_producers(raw: str) -> list[str]:
    """Split a producer credit into individual names.

    Names keep their original spelling and order; empty segments are
    dropped and repeated names are kept.

    Args:
        raw: Credit string, e.g. "Bob Cavallo, Joe Ruffalo and Steve Fargnoli"

    Returns:
        List of names, e.g. ["Bob Cavallo", "Joe Ruffalo", "Steve Fargnoli"]
    """
    return [name.strip() for name in PRODUCER_SEPARATOR.split(raw) if name.strip()]


def group_producer_wins(records: Iterable[WinningRecord]) -> dict[str, list[int]]:
    """Map each credited producer to their ascending list of win years.

    A record credited to several producers adds its year to each of them.
    """
    producer_wins: dict[str, list[int]] = {}
    for record in records:
        for producer in parse_producers(record.producers):
            producer_wins.setdefault(producer, []).append(record.year)

    for years in producer_wins.values():
        years.sort()

    return producer_wins


def calculate_intervals(producer_wins: dict[str, list[int]]) -> list[ProducerInterval]:
    """One interval per pair of consecutive wins; N wins give N-1 intervals."""
    intervals: list[ProducerInterval] = []
    for producer, years in producer_wins.items():
        for previous_win, following_win in zip(years, years[1:]):
            intervals.append(
                ProducerInterval(
                    producer=producer,
                    interval=following_win - previous_win,
                    previous_win=previous_win,
                    following_win=following_win,
                )
            )
    return intervals


def select_extremes(intervals: list[ProducerInterval]) -> PrizeIntervalResponse:
    """Keep every interval tied at the global minimum and maximum."""
    if not intervals:
        return PrizeIntervalResponse(min=[], max=[])

    min_value = min(entry.interval for entry in intervals)
    max_value = max(entry.interval for entry in intervals)

    return PrizeIntervalResponse(
        min=[entry for entry in intervals if entry.interval == min_value],
        max=[entry for entry in intervals if entry.interval == max_value],
    )


def compute_prize_intervals(records: Iterable[WinningRecord]) -> PrizeIntervalResponse:
    intervals = calculate_intervals(group_producer_wins(records))
    logger.debug("Computed %d producer win intervals", len(intervals))
    return select_extremes(intervals)


async def get_prize_intervals(db: AsyncSession) -> PrizeIntervalResponse:
    """Fetch the winning movies and compute the min/max interval sets.

    Args:
        db: Async database session

    Returns:
        PrizeIntervalResponse with the tied minimum and maximum entries
    """
    winners = await list_winning_records(db)
    return compute_prize_intervals(winners)
