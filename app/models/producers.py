"""Pydantic models for producer award-interval responses."""

from pydantic import BaseModel, ConfigDict, Field


class ProducerInterval(BaseModel):
    """Gap between two consecutive wins of one producer."""

    model_config = ConfigDict(populate_by_name=True)

    producer: str
    interval: int
    previous_win: int = Field(alias="previousWin")
    following_win: int = Field(alias="followingWin")


class PrizeIntervalResponse(BaseModel):
    min: list[ProducerInterval] = Field(default_factory=list)
    max: list[ProducerInterval] = Field(default_factory=list)
