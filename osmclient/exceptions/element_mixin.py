from typing import NoReturn

from osmclient.exceptions.errors import DataIntegrityError, InvalidArgumentError
from osmclient.models.element import ElementId, ElementType


class ElementExceptionsMixin:
    def element_version_missing(self, type: ElementType, id: ElementId | None) -> NoReturn:
        raise InvalidArgumentError(
            f'The {type} with the id {id} has no version; it is required to update or delete an element'
        )

    def element_id_missing(self, type: ElementType) -> NoReturn:
        raise InvalidArgumentError(f'The {type} has no id; it is required to update or delete an element')

    def element_bad_type(self, type: str) -> NoReturn:
        raise InvalidArgumentError(f'Unsupported element type {type!r}')

    def element_member_missing(
        self,
        parent_type: ElementType,
        parent_id: ElementId,
        member_type: ElementType,
        member_id: ElementId,
    ) -> NoReturn:
        raise DataIntegrityError(
            f'The {parent_type} with the id {parent_id} references {member_type} {member_id}, '
            'which is missing from the response'
        )

    def element_missing(self, type: ElementType, id: ElementId) -> NoReturn:
        raise DataIntegrityError(f'The response does not contain the {type} with the id {id}')
