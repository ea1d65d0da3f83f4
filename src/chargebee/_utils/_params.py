import json
from collections.abc import Mapping, Sequence
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Union

from httpx import QueryParams

from ._timestamps import convert_to_timestamp

ParamValue = Union[str, list[str], list[dict[str, str]]]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _convert_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _convert_scalar(value.value)
    if isinstance(value, datetime):
        return str(convert_to_timestamp(value))
    if isinstance(value, Mapping):
        # JSON payload parameters, e.g. meta_data
        return json.dumps(value, separators=(",", ":"), default=str)
    if _is_sequence(value):
        return json.dumps(list(value), separators=(",", ":"), default=str)
    return str(value)


def _convert(name: str, value: Any) -> ParamValue:
    if not _is_sequence(value):
        return _convert_scalar(value)

    items = [item for item in value if item is not None]
    if items and any(isinstance(item, Mapping) for item in items):
        if not all(isinstance(item, Mapping) for item in items):
            raise TypeError(
                f"Parameter '{name}' mixes mappings and scalars in one list"
            )
        return [
            {
                str(field): _convert_scalar(field_value)
                for field, field_value in item.items()
                if field_value is not None
            }
            for item in items
        ]

    return [_convert_scalar(item) for item in items]


class Params:
    """Ordered set of request parameters serialized into a form-encoded string.

    Values may be scalars, sequences of scalars or sequences of mappings.
    ``None`` values are ignored. Adding a name twice replaces the earlier value
    but keeps its original position.
    """

    def __init__(self) -> None:
        self._params: dict[str, ParamValue] = {}

    def add(self, name: str, value: Any) -> "Params":
        if value is None:
            return self

        self._params[name] = _convert(name, value)
        return self

    def serialize(self, is_list: bool = False) -> str:
        """Serialize the parameters as ``key=value`` pairs joined with ``&``.

        Args:
            is_list (bool): Use the list-fetch conventions. Sequences of scalars
                are then sent as a single JSON array (the API's list filter
                format) instead of repeated ``name[]`` pairs.

        Returns:
            str: The percent-encoded query. Empty when there are no parameters.
        """
        pairs: list[tuple[str, str]] = []

        for name, value in self._params.items():
            if isinstance(value, str):
                pairs.append((name, value))
            elif value and isinstance(value[0], dict):
                for index, sub_mapping in enumerate(value):
                    for field, field_value in sub_mapping.items():  # type: ignore[union-attr]
                        pairs.append((f"{name}[{index}][{field}]", field_value))
            elif is_list:
                pairs.append((name, json.dumps(value, separators=(",", ":"))))
            else:
                pairs.extend((f"{name}[]", item) for item in value)  # type: ignore[misc]

        return str(QueryParams(pairs))

    def items(self) -> Iterator[tuple[str, ParamValue]]:
        return iter(self._params.items())

    @property
    def is_empty(self) -> bool:
        return not self._params

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"Params({self._params!r})"
