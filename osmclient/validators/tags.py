from collections.abc import Mapping

from osmclient.lib.exceptions_context import raise_for

CHANGESET_REQUIRED_TAGS = ('comment', 'created_by')


def validate_required_tags(tags: Mapping[str, str] | None, *keys: str) -> None:
    """Ensure every key is present and maps to a non-empty value."""
    for key in keys:
        if not tags or not tags.get(key):
            raise_for.changeset_tag_missing(key)
