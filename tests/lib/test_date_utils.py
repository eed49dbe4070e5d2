from datetime import UTC, datetime, timedelta, timezone

import pytest

from osmclient.lib.date_utils import format_query_date, parse_query_date


@pytest.mark.parametrize(
    ('input', 'expected'),
    [
        (datetime(2021, 12, 31, 15, 30, 45), '2021-12-31 15:30:45 UTC'),  # noqa: DTZ001
        (datetime(2021, 12, 31, 15, 30, 45, 123456, UTC), '2021-12-31 15:30:45 UTC'),
        (datetime(2022, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=9))), '2021-12-31 15:30:00 UTC'),
    ],
)
def test_format_query_date(input, expected):
    assert format_query_date(input) == expected


def test_parse_query_date():
    assert parse_query_date('2019-06-15 08:26:04 UTC') == datetime(2019, 6, 15, 8, 26, 4, tzinfo=UTC)


def test_parse_query_date_invalid():
    with pytest.raises(ValueError):
        parse_query_date('2019-06-15T08:26:04Z')
