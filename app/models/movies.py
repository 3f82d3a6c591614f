"""Request/response models for the movie catalog."""

from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel


class MovieBase(SQLModel):
    year: int
    title: str = Field(min_length=1)
    studios: str = Field(min_length=1)
    producers: str = Field(min_length=1)
    winner: bool = False

    @field_validator("title", "studios", "producers")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class MovieCreate(MovieBase):
    """Request model for creating a movie, also used for full replacement."""


class MovieUpdate(SQLModel):
    """Request model for partial updates; only fields sent are applied."""

    year: Optional[int] = None
    title: Optional[str] = Field(default=None, min_length=1)
    studios: Optional[str] = Field(default=None, min_length=1)
    producers: Optional[str] = Field(default=None, min_length=1)
    winner: Optional[bool] = None

    @field_validator("year", "title", "studios", "producers", "winner", mode="before")
    @classmethod
    def not_null(cls, v):
        # Columns are NOT NULL; an explicit null can't be applied
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    @field_validator("title", "studios", "producers")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class MovieRead(MovieBase):
    id: int
