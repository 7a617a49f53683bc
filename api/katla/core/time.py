"""Time helpers shared by the audit stamping code.

Timestamps are stored in naive ``DateTime`` columns
(TIMESTAMP WITHOUT TIME ZONE), always expressed in UTC.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as a naive datetime object.

    The aware UTC time has its tzinfo stripped so that values compare
    cleanly with what comes back from the naive database columns.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
