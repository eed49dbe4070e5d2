from osmclient.lib.exceptions_context import raise_for
from osmclient.models.element import ELEMENT_TYPES, Element, ElementType


def validate_has_version(element: Element) -> None:
    """Ensure the element can be updated or deleted: it must have an id and a version."""
    type = element['type']
    id = element.get('id')
    if id is None:
        raise_for.element_id_missing(type)
    if element.get('version') is None:
        raise_for.element_version_missing(type, id)


def validate_element_type(type: str) -> ElementType:
    if type not in ELEMENT_TYPES:
        raise_for.element_bad_type(type)
    return type  # type: ignore[return-value]


def validate_id[T: int](name: str, value: T) -> T:
    # bool is an int subclass, but never a valid id
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise_for.bad_id(name, value)
    return value
