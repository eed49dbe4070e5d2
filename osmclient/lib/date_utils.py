from datetime import UTC, datetime


def format_query_date(dt: datetime, /) -> str:
    """
    Format a datetime in the fixed format of changeset and note queries.

    Naive datetimes are assumed to be in UTC.

    >>> format_query_date(datetime(2021, 12, 31, 15, 30, 45))
    '2021-12-31 15:30:45 UTC'
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(UTC)
    return dt.strftime('%Y-%m-%d %H:%M:%S UTC')


def parse_query_date(s: str, /) -> datetime:
    """
    Parse a date in the fixed format of note responses.

    >>> parse_query_date('2019-06-15 08:26:04 UTC')
    datetime.datetime(2019, 6, 15, 8, 26, 4, tzinfo=datetime.timezone.utc)
    """
    return datetime.strptime(s, '%Y-%m-%d %H:%M:%S UTC').replace(tzinfo=UTC)
