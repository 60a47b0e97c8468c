"""Calendar dates in Japan Standard Time."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass

from .errors import InvalidDateError

JST = _dt.timezone(_dt.timedelta(hours=9), "JST")


@dataclass(frozen=True, order=True, repr=False)
class JstDate:
    """A date that is always read as a day in Japan Standard Time."""

    value: _dt.date

    def __post_init__(self) -> None:
        if isinstance(self.value, _dt.datetime) or not isinstance(self.value, _dt.date):
            raise TypeError("JstDate needs a datetime.date")

    @classmethod
    def of(cls, year: int, month: int, day: int) -> JstDate:
        """Build a date from year, month and day; raise InvalidDateError if it does not exist."""
        try:
            return cls(_dt.date(year, month, day))
        except ValueError:
            raise InvalidDateError(f"無効な日付: {year}/{month}/{day}") from None

    @classmethod
    def from_date(cls, value: _dt.date) -> JstDate:
        """Take a plain date as a JST date."""
        return cls(value)

    @classmethod
    def today(cls) -> JstDate:
        """The current date in JST."""
        return cls(_dt.datetime.now(JST).date())

    @classmethod
    def from_utc_datetime(cls, value: _dt.datetime) -> JstDate:
        """The JST date of a UTC moment; a naive datetime is taken as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=_dt.timezone.utc)
        return cls(value.astimezone(JST).date())

    @classmethod
    def parse(cls, text: str) -> JstDate:
        """Parse an ISO date such as 2024-03-15."""
        try:
            return cls(_dt.date.fromisoformat(text))
        except (TypeError, ValueError):
            raise InvalidDateError(f"無効な日付文字列: {text}") from None

    def to_date(self) -> _dt.date:
        return self.value

    def to_utc_datetime(self) -> _dt.datetime:
        """The UTC moment of 00:00:00 JST on this date."""
        midnight = _dt.datetime.combine(self.value, _dt.time(), JST)
        return midnight.astimezone(_dt.timezone.utc)

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    def __str__(self) -> str:
        return self.value.isoformat()

    def __repr__(self) -> str:
        return f"JstDate({self.value.isoformat()})"