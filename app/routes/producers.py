from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.producers import PrizeIntervalResponse
from app.services.prize_interval_service import get_prize_intervals
from app.utils.db_async import get_session

router = APIRouter(prefix="/producers", tags=["producers"])


@router.get("/awards-interval", response_model=PrizeIntervalResponse)
async def awards_interval(
    db: AsyncSession = Depends(get_session),
) -> PrizeIntervalResponse:
    """Producers with the shortest and the longest gap between two consecutive wins."""
    return await get_prize_intervals(db)
