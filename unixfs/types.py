"""Shared value types (ModTime)."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from unixfs.constants import MAX_MTIME_NANOS, NANOS_PER_SECOND

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class ModTime:
    """
    Modification time as stored on the wire: whole seconds since the Unix
    epoch plus a nanosecond fraction.
    """
    seconds: int
    nanos: int = 0

    def __post_init__(self):
        if not 0 <= self.nanos <= MAX_MTIME_NANOS:
            raise ValueError(f"nanos must be in [0, {MAX_MTIME_NANOS}], got {self.nanos}")

    @classmethod
    def from_ns(cls, ns: int) -> 'ModTime':
        """
        Build from integer nanoseconds since the epoch (e.g. ``st_mtime_ns``).

        Args:
            ns: Nanoseconds since the Unix epoch, may be negative

        Returns:
            ModTime with nanos normalized into [0, 1e9)
        """
        seconds, nanos = divmod(ns, NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'ModTime':
        """
        Build from a datetime. Naive datetimes are taken to be UTC.

        Args:
            dt: Datetime to convert (microsecond precision)

        Returns:
            Equivalent ModTime
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - EPOCH
        return cls(
            seconds=delta.days * 86400 + delta.seconds,
            nanos=delta.microseconds * 1000,
        )

    def to_ns(self) -> int:
        """Nanoseconds since the epoch."""
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def to_datetime(self) -> datetime:
        """UTC datetime; sub-microsecond precision is truncated."""
        return EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)
