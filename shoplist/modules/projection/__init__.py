"""
View projection module.

Side-effect free filtering and sorting of cached lists and items.

Public API:
- project: Project lists or items with SearchParams
- project_lists, project_items: Typed variants
- SearchParams, SortKey: The view query
"""

from .models import SearchParams, SortKey, DEFAULT_SORT
from .service import project, project_lists, project_items, collation_key

__all__ = [
    "project",
    "project_lists",
    "project_items",
    "collation_key",
    "SearchParams",
    "SortKey",
    "DEFAULT_SORT",
]
