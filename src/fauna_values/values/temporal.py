"""Temporal values: `FaunaTime` timestamps and `FaunaDate` calendar dates.

Both keep the ISO-8601 string they were given (or derived) as their
canonical form; conversion back to native `datetime`/`date` objects is
done on demand.
"""

import datetime as dt
import re
from typing import Self

from pydantic import BaseModel, field_validator

from fauna_values.errors import InvalidValue

# Python datetimes stop at microseconds; the wire may carry nanoseconds.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


def _as_utc(value: dt.datetime) -> dt.datetime:
    """Convert to UTC, taking naive datetimes to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.UTC)
    return value.astimezone(dt.UTC)


class FaunaTime(BaseModel, frozen=True):
    """A timestamp, wire form `{"@ts": "2023-01-01T00:00:00.000Z"}`.

    Only UTC is accepted: the string must end in `Z`.
    """

    value: str
    """ISO-8601 time with a `Z` designator."""

    @field_validator("value")
    @classmethod
    def require_utc(cls, value: str) -> str:
        if not value.endswith("Z"):
            msg = f"Only allowed timezone is 'Z', got: {value}"
            raise InvalidValue(msg)
        return value

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Wrap an ISO-8601 string that ends in `Z`."""
        return cls(value=value)

    @classmethod
    def from_datetime(cls, value: dt.datetime) -> Self:
        """Format a datetime in UTC with microsecond precision."""
        utc = _as_utc(value)
        return cls(value=f"{utc.replace(tzinfo=None).isoformat(timespec='microseconds')}Z")

    @property
    def date(self) -> dt.datetime:
        """The timestamp as an aware UTC datetime.

        This is lossy: fractional seconds beyond microseconds are dropped.
        """
        try:
            parsed = dt.datetime.fromisoformat(_EXTRA_FRACTION.sub(r"\1", self.value, count=1))
        except ValueError as e:
            msg = f"Cannot parse timestamp: {self.value}"
            raise InvalidValue(msg, source=e) from e
        return parsed.astimezone(dt.UTC)

    def to_wire(self) -> dict[str, object]:
        return {"@ts": self.value}


class FaunaDate(BaseModel, frozen=True):
    """A calendar date, wire form `{"@date": "2023-06-15"}`."""

    value: str
    """ISO-8601 date, `YYYY-MM-DD`. Not validated."""

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Wrap a date string verbatim."""
        return cls(value=value)

    @classmethod
    def from_date(cls, value: dt.date) -> Self:
        """Keep the date part of `value`, reading datetimes in UTC."""
        if isinstance(value, dt.datetime):
            value = _as_utc(value).date()
        return cls(value=value.isoformat())

    @property
    def date(self) -> dt.date:
        try:
            return dt.date.fromisoformat(self.value)
        except ValueError as e:
            msg = f"Cannot parse date: {self.value}"
            raise InvalidValue(msg, source=e) from e

    @property
    def datetime(self) -> dt.datetime:
        """Midnight UTC of this date."""
        return dt.datetime.combine(self.date, dt.time(), tzinfo=dt.UTC)

    def to_wire(self) -> dict[str, object]:
        return {"@date": self.value}
