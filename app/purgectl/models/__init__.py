"""Data models for purgectl.

This module exports the core data structures used throughout the application.
"""

from purgectl.models.action import CleanupResult, RemovalResult, RemovalStatus
from purgectl.models.package import FoundPackage, MatchMode, PackageSource, base_name
from purgectl.models.search_result import QueryStatus, SearchResult, collect_packages

__all__ = [
    "CleanupResult",
    "FoundPackage",
    "MatchMode",
    "PackageSource",
    "QueryStatus",
    "RemovalResult",
    "RemovalStatus",
    "SearchResult",
    "base_name",
    "collect_packages",
]
