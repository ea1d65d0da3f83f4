from ._api_util import (
    build_request,
    get,
    get_async,
    get_list,
    get_list_async,
    post,
    post_async,
    send,
    send_async,
)
from .entity_request import BaseRequest, EntityRequest, ListRequest

__all__ = [
    "build_request",
    "get",
    "get_async",
    "get_list",
    "get_list_async",
    "post",
    "post_async",
    "send",
    "send_async",
    "BaseRequest",
    "EntityRequest",
    "ListRequest",
]
