import logging
from collections.abc import Iterator, Mapping, Sequence
from datetime import UTC, datetime
from io import BytesIO
from itertools import chain
from typing import Any, Literal, overload

import lxml.etree as ET
from pydantic import ByteSize
from sizestr import sizestr

from osmclient.config import XML_PARSE_MAX_SIZE
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.geo_utils import format_decimal

_parser = ET.XMLParser(
    ns_clean=True,
    resolve_entities=False,
    remove_comments=True,
    remove_pis=True,
    collect_ids=False,
    compact=False,
)


def _parse_bool(x: str) -> bool:
    return x == 'true'


class XMLToDict:
    force_list = frozenset((
        'bounds',
        'changeset',
        'create',
        'delete',
        'gpx_file',
        'lang',
        'member',
        'modify',
        'nd',
        'node',
        'note',
        'permission',
        'preference',
        'relation',
        'tag',
        'way',
    ))

    value_postprocessor = {  # noqa: RUF012
        '@account_created': datetime.fromisoformat,
        '@active': int,
        '@changes_count': int,
        '@changeset': int,
        '@closed_at': datetime.fromisoformat,
        '@comments_count': int,
        '@count': int,
        '@created_at': datetime.fromisoformat,
        '@date': datetime.fromisoformat,
        '@id': int,
        '@lat': float,
        '@lon': float,
        '@max_lat': float,
        '@max_lon': float,
        '@maxlat': float,
        '@maxlon': float,
        '@min_lat': float,
        '@min_lon': float,
        '@minlat': float,
        '@minlon': float,
        '@new_id': int,
        '@new_version': int,
        '@old_id': int,
        '@open': _parse_bool,
        '@pending': _parse_bool,
        '@agreed': _parse_bool,
        '@ref': int,
        '@timestamp': datetime.fromisoformat,
        '@uid': int,
        '@version': lambda x: int(x) if x.isdigit() else float(x),
        '@unread': int,
        '@visible': _parse_bool,
        '@zoom': int,
    }

    @staticmethod
    def parse(
        xml_bytes: bytes,
        *,
        sequence: bool = False,
        size_limit: int | ByteSize | None = XML_PARSE_MAX_SIZE,
    ) -> dict[str, Any]:
        """
        Parse XML string to dict.

        If `sequence` is `True`, then the root element is parsed as a sequence
        of (key, value) tuples, preserving the document order.
        """
        if size_limit is not None and len(xml_bytes) > size_limit:
            raise_for.input_too_big(len(xml_bytes))

        logging.debug('Parsing %s XML string', sizestr(len(xml_bytes)))

        try:
            root = ET.fromstring(xml_bytes, parser=_parser)  # noqa: S320
            return {_strip_namespace(root.tag): _parse_element(sequence, root, is_root=True)}
        except (ET.XMLSyntaxError, ValueError) as e:
            raise_for.bad_xml('document', str(e), xml_bytes)

    @staticmethod
    def iterparse(
        xml_bytes: bytes,
        tags: frozenset[str],
        *,
        size_limit: int | ByteSize | None = XML_PARSE_MAX_SIZE,
    ) -> Iterator[tuple[str, dict[str, Any]]]:
        """
        Lazily parse the direct children of the root element whose tag is in `tags`.

        Each child is yielded as a (tag, value) tuple and released afterwards,
        so the iterator can be consumed only once.
        """
        if size_limit is not None and len(xml_bytes) > size_limit:
            raise_for.input_too_big(len(xml_bytes))

        logging.debug('Iterating %s XML string', sizestr(len(xml_bytes)))

        context = ET.iterparse(
            BytesIO(xml_bytes),
            events=('start', 'end'),
            resolve_entities=False,
            remove_comments=True,
            remove_pis=True,
        )
        depth = 0
        try:
            for event, element in context:
                if event == 'start':
                    depth += 1
                    continue

                depth -= 1
                if depth != 1:
                    continue

                tag = _strip_namespace(element.tag)
                if tag in tags:
                    yield tag, _parse_element(False, element, is_root=False)

                # free memory of already processed siblings
                element.clear()
                while element.getprevious() is not None:
                    del element.getparent()[0]
        except (ET.XMLSyntaxError, ValueError) as e:
            raise_for.bad_xml('document', str(e), xml_bytes)

    @staticmethod
    @overload
    def unparse(d: Mapping[str, Any]) -> str: ...
    @staticmethod
    @overload
    def unparse(d: Mapping[str, Any], *, binary: Literal[True]) -> bytes: ...
    @staticmethod
    @overload
    def unparse(d: Mapping[str, Any], *, binary: Literal[False]) -> str: ...
    @staticmethod
    def unparse(d: Mapping[str, Any], *, binary: bool = False) -> str | bytes:
        """Unparse dict to XML string."""
        if len(d) != 1:
            raise ValueError(f'Invalid root element count {len(d)}')

        root_k, root_v = next(iter(d.items()))
        elements = _unparse_element(root_k, root_v)

        # always return root element, even if it's empty
        if not elements:
            elements = (ET.Element(root_k),)

        result: bytes = ET.tostring(elements[0], encoding='UTF-8', xml_declaration=True)
        logging.debug('Unparsed %s XML string', sizestr(len(result)))
        return result if binary else result.decode()


# read property once for performance
_force_list = XMLToDict.force_list
_value_postprocessor = XMLToDict.value_postprocessor


def _parse_element(sequence: bool, element: ET._Element, *, is_root: bool):
    parsed: list[tuple[str, Any]] = [
        (k, _postprocessor(k, v))
        for k, v in (('@' + k, v) for k, v in element.attrib.items())
    ]
    is_sequence_and_root = sequence and is_root
    parsed_children: dict[str, Any] = {}

    for child in element:
        # skip unresolved entity references
        if not isinstance(child.tag, str):
            continue
        k = _strip_namespace(child.tag)
        v = _parse_element(sequence, child, is_root=False)
        v = _postprocessor(k, v)

        # in sequence mode, return root element as tuples
        if is_sequence_and_root:
            parsed.append((k, v))

        # merge with existing value
        elif (parsed_v := parsed_children.get(k)) is not None:
            if isinstance(parsed_v, list):
                parsed_v.append(v)
            else:
                # upgrade from single value to list
                parsed_children[k] = [parsed_v, v]

        # add new value
        elif k in _force_list:
            parsed_children[k] = [v]
        else:
            parsed_children[k] = v

    if parsed_children:
        parsed.extend(parsed_children.items())

    if text := (element.text.strip() if element.text else ''):
        if parsed:
            parsed.append(('#text', text))
        else:
            return text

    if is_sequence_and_root:
        return parsed
    return dict(parsed)


def _strip_namespace(tag: str) -> str:
    return tag.rpartition('}')[-1]


def _postprocessor(key: str, value):
    if (call := _value_postprocessor.get(key)) is not None:
        return call(value)
    return value


def _unparse_element(key: str, value) -> tuple[ET._Element, ...]:
    if isinstance(value, Mapping):
        element = ET.Element(key)
        for k, v in value.items():
            if v is None:
                continue
            if k[:1] == '@':
                element.attrib[k[1:]] = _to_string(v)
            elif k == '#text':
                element.text = _to_string(v)
            else:
                element.extend(_unparse_element(k, v))
        return (element,)

    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        if not value:
            return ()

        first = value[0]
        if isinstance(first, Mapping):
            return tuple(chain.from_iterable(_unparse_element(key, v) for v in value))

        if isinstance(first, tuple):
            element = ET.Element(key)
            for k, v in value:
                if v is None:
                    continue
                if k[:1] == '@':
                    element.attrib[k[1:]] = _to_string(v)
                elif k == '#text':
                    element.text = _to_string(v)
                else:
                    element.extend(_unparse_element(k, v))
            return (element,)

        return tuple(chain.from_iterable(_unparse_element(key, v) for v in value))

    element = ET.Element(key)
    element.text = _to_string(value)
    return (element,)


def _to_string(v) -> str:
    if isinstance(v, str):
        return v
    if isinstance(v, bool):
        return 'true' if v else 'false'
    if isinstance(v, float):
        return format_decimal(v)
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(UTC).replace(tzinfo=None)
        return v.isoformat(timespec='seconds') + 'Z'
    return str(v)


def xml_text(value: Any) -> str:
    """
    Return the text content of a parsed element.

    >>> xml_text('abc'), xml_text({'@lang': 'en', '#text': 'abc'}), xml_text({})
    ('abc', 'abc', '')
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return value.get('#text', '')
    return ''


def as_list(value: Any) -> list:
    """
    Normalize a parsed child that may appear once, many times, or not at all.

    >>> as_list(None), as_list({'@k': 'a'}), as_list([{'@k': 'a'}])
    ([], [{'@k': 'a'}], [{'@k': 'a'}])
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
