from typing import Any, Optional, TypeVar, Union

from .._config import ApiConfig
from .._utils import HttpMethod, Params
from ..models.errors import MethodNotImplementedError
from ..models.results import EntityResult, ListResult
from . import _api_util

_RequestT = TypeVar("_RequestT", bound="BaseRequest")


class BaseRequest:
    """Accumulates the parameters and headers of one API operation.

    ``param`` and ``header`` mutate the request and return it, so calls can be
    chained. A builder belongs to a single request and must not be shared
    between concurrent requests.
    """

    def __init__(self, url: str, method: Union[HttpMethod, str]) -> None:
        self._url = url
        self._method = HttpMethod(method)
        self._params = Params()
        self._headers: dict[str, str] = {}

    @property
    def url(self) -> str:
        return self._url

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def params(self) -> Params:
        return self._params

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def param(self: _RequestT, name: str, value: Any) -> _RequestT:
        """Add a parameter. ``None`` values are ignored."""
        self._params.add(name, value)
        return self

    def header(self: _RequestT, name: str, value: str) -> _RequestT:
        """Add a custom header. It replaces an injected header of the same name."""
        self._headers[name] = value
        return self

    def _resolve(self, config: Optional[ApiConfig]) -> ApiConfig:
        return config if config is not None else ApiConfig.instance()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._method.value} {self._url})"


class EntityRequest(BaseRequest):
    """Request for an operation returning a single entity.

    Examples:
        ```python
        from chargebee import EntityRequest, HttpMethod, build_url

        result = (
            EntityRequest(build_url("customers"), HttpMethod.POST)
            .param("first_name", "John")
            .param("email", "john@example.com")
            .request()
        )
        customer = result.get("customer")
        ```
    """

    def request(self, config: Optional[ApiConfig] = None) -> EntityResult:
        """Send the request.

        Args:
            config (Optional[ApiConfig]): Configuration to use instead of the
                process-wide default.

        Returns:
            EntityResult: The wrapped response.

        Raises:
            MethodNotImplementedError: For PUT and DELETE requests.
        """
        if self._method == HttpMethod.GET:
            return _api_util.get(
                self._url, self._params, self._headers, self._resolve(config)
            )
        if self._method == HttpMethod.POST:
            return _api_util.post(
                self._url, self._params, self._headers, self._resolve(config)
            )
        raise MethodNotImplementedError(self._method.value)

    async def request_async(self, config: Optional[ApiConfig] = None) -> EntityResult:
        """Asynchronously send the request. See ``request``."""
        if self._method == HttpMethod.GET:
            return await _api_util.get_async(
                self._url, self._params, self._headers, self._resolve(config)
            )
        if self._method == HttpMethod.POST:
            return await _api_util.post_async(
                self._url, self._params, self._headers, self._resolve(config)
            )
        raise MethodNotImplementedError(self._method.value)


class ListRequest(BaseRequest):
    """GET request for a paginated list of entities.

    Scalar sequences are sent as JSON arrays, the format list filters such as
    ``status[in]`` expect.
    """

    def __init__(self, url: str) -> None:
        super().__init__(url, HttpMethod.GET)

    def limit(self, limit: int) -> "ListRequest":
        return self.param("limit", limit)

    def offset(self, offset: Optional[str]) -> "ListRequest":
        """Continue from the ``next_offset`` of a previous page."""
        return self.param("offset", offset)

    def request(self, config: Optional[ApiConfig] = None) -> ListResult:
        return _api_util.get_list(
            self._url, self._params, self._headers, self._resolve(config)
        )

    async def request_async(self, config: Optional[ApiConfig] = None) -> ListResult:
        return await _api_util.get_list_async(
            self._url, self._params, self._headers, self._resolve(config)
        )
