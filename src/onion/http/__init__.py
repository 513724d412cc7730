"""HTTP primitives: request, response sink, headers, query parameters."""

from onion.http.headers import Headers, MutableHeaders
from onion.http.query import QueryParams
from onion.http.request import Request
from onion.http.response import ResponseWriter

__all__ = [
    "Headers",
    "MutableHeaders",
    "QueryParams",
    "Request",
    "ResponseWriter",
]
