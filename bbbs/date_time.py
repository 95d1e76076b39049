"""Millisecond-precision UTC timestamps with RFC 3339 formatting and parsing."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import date

__all__ = ["DateTimeError", "DateTime"]

_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()
_MILLIS_PER_DAY = 86_400_000

_RFC3339 = re.compile(
    r"""
    (?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    [Tt ]
    (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})
    (?:\.(?P<fraction>\d+))?
    (?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<offset_hour>\d{2}):(?P<offset_minute>\d{2}))
    """,
    re.VERBOSE,
)


class DateTimeError(ValueError):
    """Raised when a string is not a valid millisecond-precision date time."""

    def __init__(self, message: str = "date time error") -> None:
        super().__init__(message)


@dataclass(frozen=True, order=True)
class DateTime:
    """A UNIX timestamp in milliseconds."""

    millis: int

    @classmethod
    def from_unix_timestamp_millis(cls, unix_timestamp_millis: int) -> DateTime:
        return cls(int(unix_timestamp_millis))

    @classmethod
    def now(cls) -> DateTime:
        return cls(time.time_ns() // 1_000_000)

    @classmethod
    def parse(cls, s: str) -> DateTime:
        """Parse an RFC 3339 string that carries at most millisecond precision."""
        match = _RFC3339.fullmatch(s)
        if match is None:
            raise DateTimeError()

        fraction = match["fraction"] or ""
        if fraction[3:].strip("0"):
            raise DateTimeError("DateTime must be truncated to milliseconds")
        millis_part = int(fraction[:3].ljust(3, "0"))

        hour = int(match["hour"])
        minute = int(match["minute"])
        second = int(match["second"])
        if hour > 23 or minute > 59 or second > 59:
            raise DateTimeError()

        try:
            day = date(int(match["year"]), int(match["month"]), int(match["day"]))
        except ValueError as exc:
            raise DateTimeError() from exc

        offset_seconds = 0
        if not match["utc"]:
            offset_hour = int(match["offset_hour"])
            offset_minute = int(match["offset_minute"])
            if offset_hour > 23 or offset_minute > 59:
                raise DateTimeError()
            offset_seconds = offset_hour * 3600 + offset_minute * 60
            if match["sign"] == "-":
                offset_seconds = -offset_seconds

        seconds = (
            (day.toordinal() - _EPOCH_ORDINAL) * 86_400
            + hour * 3600
            + minute * 60
            + second
            - offset_seconds
        )
        return cls(seconds * 1000 + millis_part)

    def to_unix_timestamp_millis(self) -> int:
        return self.millis

    def __int__(self) -> int:
        return self.millis

    def __str__(self) -> str:
        days, rest = divmod(self.millis, _MILLIS_PER_DAY)
        day = date.fromordinal(_EPOCH_ORDINAL + days)
        seconds, millis = divmod(rest, 1000)
        minutes, second = divmod(seconds, 60)
        hour, minute = divmod(minutes, 60)
        return (
            f"{day.isoformat()}T{hour:02d}:{minute:02d}:{second:02d}.{millis:03d}Z"
        )