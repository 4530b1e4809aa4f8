"""Logging, configuration and error types shared by the time keeping packages."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime

LOG_TIMESTAMP_FORMAT: str = "%Y-%m-%dT%H-%M-%S%f"
"""``str``: :meth:`~datetime.datetime.strftime` format of time stamps embedded in file names."""


def pathSafeTime(date_time: datetime | None = None) -> str:
    """Format a time stamp that is safe to use in a file name.

    Colons and the decimal point are left out, so the result is valid on every platform.

    Args:
        date_time (``datetime``, optional): time to format. Defaults to the current local time.

    Returns:
        ``str``: time stamp such as ``"2021-06-03T12-30-00000000"``
    """
    if date_time is None:
        date_time = datetime.now()

    return date_time.strftime(LOG_TIMESTAMP_FORMAT)
