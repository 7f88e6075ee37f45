from .config import Keep, PaginatorOptions, SelectorOptions
from .exceptions import (
    ContractViolationError,
    EntrySerializationError,
    PageWindowError,
    RequestTimeoutError,
    SourceError,
    TableNotFoundError,
    ThrottlingError,
)
from .filters import accept_all, all_of, apply_filters, payload_overlaps
from .models import NO_PARAMS, Cursor, Entry, Links
from .pagination import PageRequest, PageResult
from .paginator import Paginator, paginate
from .schemas import LinksModel, PageEnvelope
from .selector import Selector
from .sources import DynamoEntrySource, entries_from
from .window import WindowBuilder, WindowState

__all__ = [
    # Core
    "paginate",
    "Paginator",
    "PageRequest",
    "PageResult",
    "Entry",
    "Links",
    "Cursor",
    "NO_PARAMS",
    # Building blocks
    "Selector",
    "WindowBuilder",
    "WindowState",
    "Keep",
    "SelectorOptions",
    "PaginatorOptions",
    # Filters and sources
    "apply_filters",
    "accept_all",
    "all_of",
    "payload_overlaps",
    "entries_from",
    "DynamoEntrySource",
    # Rendering
    "PageEnvelope",
    "LinksModel",
    # Exceptions
    "PageWindowError",
    "ContractViolationError",
    "SourceError",
    "TableNotFoundError",
    "ThrottlingError",
    "RequestTimeoutError",
    "EntrySerializationError",
]
