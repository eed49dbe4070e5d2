from collections.abc import Iterable
from typing import NoReturn, overload

from osmclient.lib.exceptions_context import raise_for
from osmclient.models.element import (
    CompleteMember,
    CompleteRelation,
    CompleteWay,
    Element,
    ElementId,
    ElementMember,
    ElementType,
    Node,
    Relation,
    Way,
)


class CompleteGraph:
    """
    Index of the elements of a single full response document.

    Resolves member references into embedded elements, and fails when a
    referenced member is absent from the document.
    """

    __slots__ = ('_nodes', '_relations', '_ways')

    def __init__(self, elements: Iterable[Element]) -> None:
        self._nodes: dict[ElementId, Node] = {}
        self._ways: dict[ElementId, Way] = {}
        self._relations: dict[ElementId, Relation] = {}

        for element in elements:
            id: ElementId = element['id']  # type: ignore[assignment]
            match element['type']:
                case 'node':
                    self._nodes[id] = element  # type: ignore[assignment]
                case 'way':
                    self._ways[id] = element  # type: ignore[assignment]
                case 'relation':
                    self._relations[id] = element  # type: ignore[assignment]

    def complete_way(self, id: ElementId) -> CompleteWay:
        way = self._ways.get(id)
        if way is None:
            raise_for.element_missing('way', id)
        return self._complete_way(way)

    def complete_relation(self, id: ElementId) -> CompleteRelation:
        relation = self._relations.get(id)
        if relation is None:
            raise_for.element_missing('relation', id)

        members: list[CompleteMember] = []
        for member in relation['members']:
            match member.type:
                case 'node':
                    element = self._get_node(relation, member)
                case 'way':
                    way = self._ways.get(member.id)
                    if way is None:
                        self._member_missing(relation, member)
                    element = self._complete_way(way)
                case 'relation':
                    element = self._relations.get(member.id)
                    if element is None:
                        self._member_missing(relation, member)
                case _:
                    self._member_missing(relation, member)
            members.append({'role': member.role, 'element': element})

        result: CompleteRelation = {**relation, 'members': members}  # type: ignore[typeddict-item]
        return result

    def _complete_way(self, way: Way) -> CompleteWay:
        nodes = [
            self._get_node(way, ElementMember('node', node_id))
            for node_id in way['nodes']
        ]
        result: CompleteWay = {**way, 'nodes': nodes}  # type: ignore[typeddict-item]
        return result

    def _get_node(self, parent: Way | Relation, member: ElementMember) -> Node:
        node = self._nodes.get(member.id)
        if node is None:
            self._member_missing(parent, member)
        return node

    @staticmethod
    def _member_missing(parent: Way | Relation, member: ElementMember) -> NoReturn:
        raise_for.element_member_missing(
            parent['type'],
            parent['id'],  # type: ignore[arg-type]
            member.type,
            member.id,
        )


@overload
def to_simple(element: CompleteWay) -> Way: ...
@overload
def to_simple(element: CompleteRelation) -> Relation: ...
@overload
def to_simple(element: Element) -> Element: ...
def to_simple(element: CompleteWay | CompleteRelation | Element) -> Element:
    """
    Convert a complete element back to its normalized form.

    Normalized elements are returned unchanged.
    """
    type: ElementType = element['type']
    if type == 'way':
        nodes = element['nodes']  # type: ignore[typeddict-item]
        if nodes and isinstance(nodes[0], dict):
            return {**element, 'nodes': [node['id'] for node in nodes]}  # type: ignore[return-value]
    elif type == 'relation':
        members = element['members']  # type: ignore[typeddict-item]
        if members and isinstance(members[0], dict):
            return {  # type: ignore[return-value]
                **element,
                'members': [
                    ElementMember(m['element']['type'], m['element']['id'], m['role'])
                    for m in members
                ],
            }
    return element  # type: ignore[return-value]
