from collections.abc import Mapping


class Tag06Mixin:
    @staticmethod
    def encode_tags(tags: Mapping[str, str] | None) -> list[dict[str, str]]:
        """
        >>> encode_tags({'a': '1', 'b': '2'})
        [{'@k': 'a', '@v': '1'}, {'@k': 'b', '@v': '2'}]
        """
        if not tags:
            return []
        return [{'@k': k, '@v': v} for k, v in tags.items()]

    @staticmethod
    def decode_tags(tags: list[dict[str, str]] | None) -> dict[str, str]:
        """
        Decode response tags, the last value wins on a repeated key.

        >>> decode_tags([{'@k': 'a', '@v': '1'}, {'@k': 'a', '@v': '2'}])
        {'a': '2'}
        """
        if not tags:
            return {}

        result: dict[str, str] = {}
        for tag in tags:
            result[tag['@k']] = tag['@v']
        return result
