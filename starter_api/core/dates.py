"""
Date helpers.

Timestamps are stored as naive UTC. Calendar boundaries such as "start of
this month" are computed in server-local time and then converted to the
storage clock.
"""

import datetime


def utcnow() -> datetime.datetime:
    """Current time as naive UTC, the storage format of all timestamps."""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


def start_of_month(now: datetime.datetime) -> datetime.datetime:
    """First instant of the calendar month containing ``now``."""
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def local_to_storage(value: datetime.datetime) -> datetime.datetime:
    """Convert a server-local datetime to naive UTC.

    Naive input is interpreted as server-local time.
    """
    return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
