"""Award-nomination catalog table."""

from typing import Optional

from sqlmodel import Field, SQLModel


class Movie(SQLModel, table=True):  # type: ignore[call-arg]
    """One nominated movie for a given award year.

    ``producers`` holds the raw credit string exactly as published
    (e.g. "Bob Cavallo, Joe Ruffalo and Steve Fargnoli"); it is split into
    individual names only when producer statistics are computed.
    """

    __tablename__ = "movies"

    id: Optional[int] = Field(default=None, primary_key=True)
    year: int = Field(index=True)
    title: str
    studios: str
    producers: str
    winner: bool = Field(default=False, index=True)
