from datetime import UTC, datetime

from osmclient.lib.exceptions_context import raise_for


def validate_changeset_query(
    *,
    user_id: int | None,
    display_name: str | None,
    min_closed_date: datetime | None,
    max_opened_date: datetime | None,
    open_only: bool,
    closed_only: bool,
) -> None:
    """Reject filter combinations the server would refuse."""
    if user_id is not None and display_name is not None:
        raise_for.changeset_query_user_conflict()
    if open_only and closed_only:
        raise_for.changeset_query_state_conflict()
    if max_opened_date is not None and min_closed_date is None:
        raise_for.changeset_query_time_missing()


def validate_notes_search(
    *,
    q: str | None,
    user_id: int | None,
    display_name: str | None,
    from_date: datetime | None,
    to_date: datetime | None,
) -> None:
    if not q:
        raise_for.note_search_text_missing()
    if user_id is not None and display_name is not None:
        raise_for.note_query_user_conflict()
    if from_date is not None and to_date is not None and _as_utc(from_date) > _as_utc(to_date):
        raise_for.note_query_date_range(from_date, to_date)


def _as_utc(dt: datetime) -> datetime:
    # naive datetimes are UTC, as in format_query_date
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)
