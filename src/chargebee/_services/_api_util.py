from logging import getLogger
from typing import Any, Mapping, Optional, Union

from httpx import AsyncClient, Client, RequestError, Response

from .._config import ApiConfig
from .._utils import HttpMethod, Params, RequestSpec, classify_error
from .._utils.constants import (
    APPLICATION_JSON,
    FORM_URLENCODED,
    HEADER_ACCEPT,
    HEADER_ACCEPT_CHARSET,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)
from .._version import __version__
from ..models.errors import MethodNotImplementedError, NetworkError
from ..models.results import EntityResult, ListResult

logger = getLogger("chargebee")


def user_agent_value() -> str:
    return f"ChargeBee-Python-Client v{__version__}"


def build_request(
    url: str,
    method: Union[HttpMethod, str],
    headers: Mapping[str, str],
    params: Params,
    config: ApiConfig,
    *,
    is_list: bool = False,
) -> RequestSpec:
    """Build the request to send for ``url``.

    Accept, Accept-Charset, Authorization and User-Agent are always set, then
    ``headers`` is applied on top, so a custom header replaces an injected one
    whose name matches case-insensitively.

    Args:
        url (str): Absolute URL without query string.
        method (HttpMethod | str): GET or POST.
        headers (Mapping[str, str]): Custom headers.
        params (Params): Parameters, sent as the query for GET and as a
            form-encoded body for POST.
        config (ApiConfig): Configuration used for credentials and charset.
        is_list (bool): Encode the query for a list request.

    Returns:
        RequestSpec: The request descriptor.

    Raises:
        MethodNotImplementedError: For PUT and DELETE.
    """
    method = HttpMethod(method)

    request_headers: dict[str, str] = {
        HEADER_ACCEPT: APPLICATION_JSON,
        HEADER_ACCEPT_CHARSET: config.charset,
        HEADER_AUTHORIZATION: config.auth_value,
        HEADER_USER_AGENT: user_agent_value(),
    }
    content: Optional[bytes] = None

    if method == HttpMethod.GET:
        query = params.serialize(is_list)
        if query:
            url = f"{url}?{query}"
    elif method == HttpMethod.POST:
        request_headers[HEADER_CONTENT_TYPE] = (
            f"{FORM_URLENCODED};charset={config.charset}"
        )
        content = params.serialize(is_list=False).encode(config.charset)
    else:
        raise MethodNotImplementedError(method.value)

    for name, value in headers.items():
        for existing in [h for h in request_headers if h.lower() == name.lower()]:
            del request_headers[existing]
        request_headers[name] = value

    return RequestSpec(
        method=method,
        url=url,
        headers=request_headers,
        content=content,
        timeout=config.timeout,
    )


def _masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: "***" if name.lower() == HEADER_AUTHORIZATION.lower() else value
        for name, value in headers.items()
    }


def _client_kwargs(spec: RequestSpec) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"follow_redirects": True}
    if spec.timeout is not None:
        kwargs["timeout"] = spec.timeout
    return kwargs


def _handle_response(response: Response) -> tuple[str, int]:
    status_code = response.status_code
    body = response.text

    if response.is_success:
        return body, status_code

    error = classify_error(status_code, body)
    logger.debug(f"Error response: {status_code} classified as {error.kind.value}")
    raise error


def send(spec: RequestSpec) -> tuple[str, int]:
    """Send the request and return ``(body, status_code)`` for a 2xx response.

    The body of a successful response is returned untouched, even if it is
    not JSON.

    Raises:
        NetworkError: If no response was received.
        MalformedResponseError: If an error response is not a JSON object.
        ApiError: Or one of its subclasses for any other error response.
    """
    logger.debug(f"Request: {spec.method.value} {spec.url}")
    logger.debug(f"HEADERS: {_masked_headers(spec.headers)}")

    try:
        with Client(**_client_kwargs(spec)) as client:
            response = client.request(
                spec.method.value,
                spec.url,
                headers=dict(spec.headers),
                content=spec.content,
            )
    except RequestError as e:
        raise NetworkError(str(e), url=spec.url) from e

    return _handle_response(response)


async def send_async(spec: RequestSpec) -> tuple[str, int]:
    """Asynchronously send the request. Same contract as ``send``."""
    logger.debug(f"Request: {spec.method.value} {spec.url}")
    logger.debug(f"HEADERS: {_masked_headers(spec.headers)}")

    try:
        async with AsyncClient(**_client_kwargs(spec)) as client:
            response = await client.request(
                spec.method.value,
                spec.url,
                headers=dict(spec.headers),
                content=spec.content,
            )
    except RequestError as e:
        raise NetworkError(str(e), url=spec.url) from e

    return _handle_response(response)


def get(
    url: str, params: Params, headers: Mapping[str, str], config: ApiConfig
) -> EntityResult:
    spec = build_request(url, HttpMethod.GET, headers, params, config)
    body, status_code = send(spec)
    return EntityResult(status_code, body)


def get_list(
    url: str, params: Params, headers: Mapping[str, str], config: ApiConfig
) -> ListResult:
    spec = build_request(url, HttpMethod.GET, headers, params, config, is_list=True)
    body, status_code = send(spec)
    return ListResult(status_code, body)


def post(
    url: str, params: Params, headers: Mapping[str, str], config: ApiConfig
) -> EntityResult:
    spec = build_request(url, HttpMethod.POST, headers, params, config)
    body, status_code = send(spec)
    return EntityResult(status_code, body)


async def get_async(
    url: str, params: Params, headers: Mapping[str, str], config: ApiConfig
) -> EntityResult:
    spec = build_request(url, HttpMethod.GET, headers, params, config)
    body, status_code = await send_async(spec)
    return EntityResult(status_code, body)


async def get_list_async(
    url: str, params: Params, headers: Mapping[str, str], config: ApiConfig
) -> ListResult:
    spec = build_request(url, HttpMethod.GET, headers, params, config, is_list=True)
    body, status_code = await send_async(spec)
    return ListResult(status_code, body)


async def post_async(
    url: str, params: Params, headers: Mapping[str, str], config: ApiConfig
) -> EntityResult:
    spec = build_request(url, HttpMethod.POST, headers, params, config)
    body, status_code = await send_async(spec)
    return EntityResult(status_code, body)
