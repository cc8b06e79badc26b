from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from dateutil.tz import gettz


@dataclass(frozen=True, slots=True)
class DateStamp:
    """Year/month/day triple an entry is named after."""

    year: int
    month: int
    day: int

    @classmethod
    def from_datetime(cls, value: date | datetime) -> "DateStamp":
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def today(cls, timezone_name: str | None = None) -> "DateStamp":
        if timezone_name is None:
            return cls.from_datetime(datetime.now())
        tzinfo = gettz(timezone_name)
        if tzinfo is None:
            raise ValueError(f"Unknown timezone: {timezone_name}")
        return cls.from_datetime(datetime.now(tzinfo))

    @property
    def year_str(self) -> str:
        return f"{self.year:04d}"

    @property
    def month_str(self) -> str:
        return f"{self.month:02d}"

    @property
    def day_str(self) -> str:
        return f"{self.day:02d}"

    def isoformat(self) -> str:
        return f"{self.year_str}-{self.month_str}-{self.day_str}"
