"""Entry use cases (admin)."""

from .common import EntryResponse
from .create_entry import CreateEntryRequest, CreateEntryUseCase
from .get_dashboard import DashboardResponse, GetDashboardUseCase
from .get_entry import GetEntryRequest, GetEntryUseCase
from .list_entries import ListEntriesRequest, ListEntriesResponse, ListEntriesUseCase
from .set_publication import SetPublicationRequest, SetPublicationUseCase
from .update_entry import UpdateEntryRequest, UpdateEntryUseCase

__all__ = [
    "CreateEntryRequest",
    "CreateEntryUseCase",
    "DashboardResponse",
    "EntryResponse",
    "GetDashboardUseCase",
    "GetEntryRequest",
    "GetEntryUseCase",
    "ListEntriesRequest",
    "ListEntriesResponse",
    "ListEntriesUseCase",
    "SetPublicationRequest",
    "SetPublicationUseCase",
    "UpdateEntryRequest",
    "UpdateEntryUseCase",
]
