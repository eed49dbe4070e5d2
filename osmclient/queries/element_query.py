import logging
from asyncio import TaskGroup
from collections.abc import Iterable, Mapping, Sequence
from typing import cast

from osmclient.exceptions import APIError
from osmclient.format import Format06
from osmclient.lib.complete_graph import CompleteGraph
from osmclient.models.element import (
    ELEMENT_TYPES,
    CompleteRelation,
    CompleteWay,
    Element,
    ElementId,
    ElementRef,
    ElementType,
    Node,
    Relation,
    Way,
)
from osmclient.queries.query_base import QueryBase
from osmclient.validators.element import validate_element_type, validate_id

# element reads by id return None for these statuses
_ELEMENT_ABSENT_STATUSES = frozenset((404, 410))

type _IdVersions = Iterable[ElementId] | Mapping[ElementId, int | None]


class ElementQueryMixin(QueryBase):
    __slots__ = ()

    async def get_node(self, id: ElementId) -> Node | None:
        return cast(Node | None, await self.get_element('node', id))

    async def get_way(self, id: ElementId) -> Way | None:
        return cast(Way | None, await self.get_element('way', id))

    async def get_relation(self, id: ElementId) -> Relation | None:
        return cast(Relation | None, await self.get_element('relation', id))

    async def get_element(self, type: ElementType, id: ElementId) -> Element | None:
        """
        Get the current version of an element.

        Returns None if the element does not exist or was deleted.
        """
        validate_element_type(type)
        validate_id('element id', id)
        try:
            content = await self._get(f'0.6/{type}/{id}')
        except APIError as e:
            if e.status_code in _ELEMENT_ABSENT_STATUSES:
                logging.debug('Element %s/%d is absent (%d)', type, id, e.status_code)
                return None
            raise
        return self._decode(f'{type} document', lambda c: _first_element(c, type), content)

    async def get_complete_way(self, id: ElementId) -> CompleteWay:
        """Get a way with all of its nodes embedded."""
        validate_id('way id', id)
        content = await self._get(f'0.6/way/{id}/full')
        graph = self._decode('way document', _element_graph, content)
        return graph.complete_way(id)

    async def get_complete_relation(self, id: ElementId) -> CompleteRelation:
        """
        Get a relation with its member elements embedded.

        Member ways embed their nodes, member relations are not expanded.
        """
        validate_id('relation id', id)
        content = await self._get(f'0.6/relation/{id}/full')
        graph = self._decode('relation document', _element_graph, content)
        return graph.complete_relation(id)

    async def get_node_history(self, id: ElementId) -> list[Node]:
        return await self._get_history('node', id)  # type: ignore[return-value]

    async def get_way_history(self, id: ElementId) -> list[Way]:
        return await self._get_history('way', id)  # type: ignore[return-value]

    async def get_relation_history(self, id: ElementId) -> list[Relation]:
        return await self._get_history('relation', id)  # type: ignore[return-value]

    async def get_node_version(self, id: ElementId, version: int) -> Node:
        return await self._get_version('node', id, version)  # type: ignore[return-value]

    async def get_way_version(self, id: ElementId, version: int) -> Way:
        return await self._get_version('way', id, version)  # type: ignore[return-value]

    async def get_relation_version(self, id: ElementId, version: int) -> Relation:
        return await self._get_version('relation', id, version)  # type: ignore[return-value]

    async def get_nodes(self, ids: _IdVersions) -> list[Node]:
        """
        Get many nodes, optionally pinned to versions.

        >>> await client.get_nodes([1, 2])
        >>> await client.get_nodes({1: None, 2: 3})
        """
        return await self._get_many('node', ids)  # type: ignore[return-value]

    async def get_ways(self, ids: _IdVersions) -> list[Way]:
        return await self._get_many('way', ids)  # type: ignore[return-value]

    async def get_relations(self, ids: _IdVersions) -> list[Relation]:
        return await self._get_many('relation', ids)  # type: ignore[return-value]

    async def get_elements(self, refs: Iterable[ElementRef]) -> list[Element]:
        """Get many elements of mixed types, grouped by type in the result."""
        by_type: dict[ElementType, dict[ElementId, int | None]] = {type: {} for type in ELEMENT_TYPES}
        for ref in refs:
            by_type[validate_element_type(ref.type)][ref.id] = ref.version

        result: list[Element] = []
        for type, id_versions in by_type.items():
            if id_versions:
                result.extend(await self._get_many(type, id_versions))
        return result

    async def get_node_relations(self, id: ElementId) -> list[Relation]:
        return await self._get_relations_of('node', id)

    async def get_way_relations(self, id: ElementId) -> list[Relation]:
        return await self._get_relations_of('way', id)

    async def get_relation_relations(self, id: ElementId) -> list[Relation]:
        return await self._get_relations_of('relation', id)

    async def get_node_ways(self, id: ElementId) -> list[Way]:
        """Get the ways that use the node."""
        validate_id('node id', id)
        content = await self._get(f'0.6/node/{id}/ways')
        return self._decode('way document', lambda c: _list_elements(c, 'way'), content)  # type: ignore[return-value]

    async def _get_history(self, type: ElementType, id: ElementId) -> list[Element]:
        validate_id(f'{type} id', id)
        content = await self._get(f'0.6/{type}/{id}/history')
        return self._decode(f'{type} history', lambda c: _list_elements(c, type), content)

    async def _get_version(self, type: ElementType, id: ElementId, version: int) -> Element:
        validate_id(f'{type} id', id)
        validate_id(f'{type} version', version)
        content = await self._get(f'0.6/{type}/{id}/{version}')
        return self._decode(f'{type} document', lambda c: _first_element(c, type), content)

    async def _get_relations_of(self, type: ElementType, id: ElementId) -> list[Relation]:
        validate_id(f'{type} id', id)
        content = await self._get(f'0.6/{type}/{id}/relations')
        return self._decode('relation document', lambda c: _list_elements(c, 'relation'), content)  # type: ignore[return-value]

    async def _get_many(self, type: ElementType, ids: _IdVersions) -> list[Element]:
        """
        Fetch elements in chunks, issued concurrently.

        The first failing chunk cancels the remaining ones and its error is raised.
        """
        items = list(ids.items()) if isinstance(ids, Mapping) else [(id, None) for id in ids]
        if not items:
            return []
        for id, version in items:
            validate_id(f'{type} id', id)
            if version is not None:
                validate_id(f'{type} version', version)

        chunk_size = self._chunk_size
        chunks = [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]
        logging.debug('Fetching %d %ss in %d chunks', len(items), type, len(chunks))

        try:
            async with TaskGroup() as tg:
                tasks = [tg.create_task(self._get_chunk(type, chunk)) for chunk in chunks]
        except ExceptionGroup as eg:
            raise eg.exceptions[0] from None

        return [element for task in tasks for element in task.result()]

    async def _get_chunk(
        self,
        type: ElementType,
        chunk: Sequence[tuple[ElementId, int | None]],
    ) -> list[Element]:
        param = ','.join(str(id) if version is None else f'{id}v{version}' for id, version in chunk)
        content = await self._get(f'0.6/{type}s', params={f'{type}s': param})
        return self._decode(f'{type} document', lambda c: _list_elements(c, type), content)


def _list_elements(content: bytes, type: ElementType) -> list[Element]:
    return list(Format06.iter_elements(content, (type,)))


def _first_element(content: bytes, type: ElementType) -> Element:
    element = next(Format06.iter_elements(content, (type,)), None)
    if element is None:
        raise ValueError(f'Document does not contain a {type}')
    return element


def _element_graph(content: bytes) -> CompleteGraph:
    return CompleteGraph(Format06.iter_elements(content, ELEMENT_TYPES))
