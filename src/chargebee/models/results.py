import json
from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any, Iterator, Mapping, Optional, Type, TypeVar, overload

from pydantic import BaseModel

from .errors import MalformedResponseError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_object(status_code: int, body: str) -> dict[str, Any]:
    try:
        parsed = json.loads(body)
    except ValueError as e:
        raise MalformedResponseError(status_code, body) from e
    if not isinstance(parsed, dict):
        raise MalformedResponseError(status_code, body)
    return parsed


class _ResourceLookup(ABC):
    """Memoized access to the ``{kind: payload}`` pairs of a JSON object.

    A value is decoded the first time it is requested for a given model and
    then served from the cache.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[str, Optional[type]], Any] = {}

    @property
    @abstractmethod
    def _values(self) -> Mapping[str, Any]: ...

    @overload
    def get(self, name: str) -> Any: ...

    @overload
    def get(self, name: str, model: Type[ModelT]) -> Optional[ModelT]: ...

    def get(self, name: str, model: Optional[type] = None) -> Any:
        """Return the value stored under ``name``.

        Args:
            name (str): The resource kind, e.g. ``"customer"``.
            model (Optional[type]): A pydantic model to validate the value with.

        Returns:
            The raw JSON value, the validated model, or ``None`` if absent.
        """
        key = (name, model)
        if key in self._cache:
            return self._cache[key]

        raw = self._values.get(name)
        value = raw
        if raw is not None and model is not None:
            value = model.model_validate(raw)

        self._cache[key] = value
        return value

    def kinds(self) -> list[str]:
        return list(self._values)

    def __getitem__(self, name: str) -> Any:
        if name not in self._values:
            raise KeyError(name)
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values


class EntityResult(_ResourceLookup):
    """Result of a single-entity request.

    The body is parsed on first access, not on construction.

    Examples:
        ```python
        result = EntityRequest(url, HttpMethod.GET).request()
        result.status_code  # 200
        result.get("customer")  # {"id": "c1", ...}
        ```
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__()
        self._status_code = status_code
        self._body = body

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def body(self) -> str:
        return self._body

    @cached_property
    def _values(self) -> Mapping[str, Any]:  # type: ignore[override]
        return _parse_object(self._status_code, self._body)

    def __repr__(self) -> str:
        return f"EntityResult(status_code={self._status_code!r})"


class ListEntry(_ResourceLookup):
    """One row of a list response.

    A row may hold several kinds, e.g. a subscription together with its
    customer and card.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        super().__init__()
        self._raw = values

    @property
    def _values(self) -> Mapping[str, Any]:
        return self._raw

    def __repr__(self) -> str:
        return f"ListEntry(kinds={self.kinds()!r})"


class ListResult:
    """Result of a list request: one page of entries plus a cursor.

    ``next_offset`` is opaque; pass it back as the ``offset`` parameter to
    fetch the next page. ``None`` means this is the last page.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self._status_code = status_code
        self._body = body

    @property
    def status_code(self) -> int:
        return self._status_code

    @cached_property
    def _parsed(self) -> dict[str, Any]:
        parsed = _parse_object(self._status_code, self._body)
        if not isinstance(parsed.get("list", []), list):
            raise MalformedResponseError(self._status_code, self._body)
        return parsed

    @cached_property
    def entries(self) -> list[ListEntry]:
        entries = []
        for item in self._parsed.get("list") or []:
            if not isinstance(item, dict):
                raise MalformedResponseError(self._status_code, self._body)
            entries.append(ListEntry(item))
        return entries

    @property
    def next_offset(self) -> Optional[str]:
        return self._parsed.get("next_offset")

    @property
    def has_next_page(self) -> bool:
        return self.next_offset is not None

    def __iter__(self) -> Iterator[ListEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> ListEntry:
        return self.entries[index]

    def __repr__(self) -> str:
        return f"ListResult(status_code={self._status_code!r})"
