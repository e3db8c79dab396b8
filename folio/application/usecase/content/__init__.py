"""Public content use cases."""

from .common import PublishedEntry, PublishedEntryDetail
from .get_published import GetPublishedRequest, GetPublishedResponse, GetPublishedUseCase
from .list_published import (
    ListPublishedRequest,
    ListPublishedResponse,
    ListPublishedUseCase,
)

__all__ = [
    "GetPublishedRequest",
    "GetPublishedResponse",
    "GetPublishedUseCase",
    "ListPublishedRequest",
    "ListPublishedResponse",
    "ListPublishedUseCase",
    "PublishedEntry",
    "PublishedEntryDetail",
]
