"""
Service layer for the Traced API.

Services hold the directory logic; routers stay thin:
parse request → call service → return response.
"""
from .catalog import Catalog, load_catalog
from .query_context import DirectoryOptions, QueryContext, resolve_query_context
from .listing import DirectoryListing, DirectoryResult, NoMatches
from .notes import resolve_note
from .staleness import evaluate_staleness
from .cards import build_card
from .directory_service import build_directory, directory_service

__all__ = [
    "Catalog",
    "load_catalog",
    "DirectoryOptions",
    "QueryContext",
    "resolve_query_context",
    "DirectoryListing",
    "DirectoryResult",
    "NoMatches",
    "resolve_note",
    "evaluate_staleness",
    "build_card",
    "build_directory",
    "directory_service",
]
