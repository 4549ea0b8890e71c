"""
View projection.

Pure functions deriving filtered and sorted views of lists or items.
Nothing here touches a store: inputs are read, never mutated, and a new
list is always returned. Filtering always happens before sorting.
"""

import unicodedata
from datetime import datetime, timezone
from typing import Sequence, TypeVar, Union

from shoplist.modules.shopping.models import ShoppingItem, ShoppingList

from .models import SearchParams, SortKey

E = TypeVar("E", ShoppingList, ShoppingItem)


def collation_key(value: str) -> str:
    """
    Case- and accent-insensitive sort key.

    "Éclair" and "eclair" compare equal, so a stable sort keeps them in
    input order.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def _date_key(entity: Union[ShoppingList, ShoppingItem]) -> datetime:
    created = entity.created_at
    # Naive timestamps are treated as UTC so they compare with aware ones
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created


def _matches(needle: str, *fields: str) -> bool:
    return any(needle in field.casefold() for field in fields)


def _sort(entities: list[E], sort: SortKey | None, allow_category: bool) -> list[E]:
    if sort == SortKey.NAME_ASC:
        return sorted(entities, key=lambda e: collation_key(e.name))
    if sort == SortKey.NAME_DESC:
        return sorted(entities, key=lambda e: collation_key(e.name), reverse=True)
    if sort == SortKey.DATE_ASC:
        return sorted(entities, key=_date_key)
    if sort == SortKey.DATE_DESC:
        return sorted(entities, key=_date_key, reverse=True)
    if sort == SortKey.CATEGORY and allow_category:
        return sorted(entities, key=lambda e: collation_key(e.category))
    return list(entities)


def project_lists(
    lists: Sequence[ShoppingList],
    params: SearchParams,
) -> list[ShoppingList]:
    """Search over name and description, then sort. Category is ignored."""
    result = list(lists)
    if params.search:
        needle = params.search.casefold()
        result = [lst for lst in result if _matches(needle, lst.name, lst.description)]
    return _sort(result, params.sort, allow_category=False)


def project_items(
    items: Sequence[ShoppingItem],
    params: SearchParams,
) -> list[ShoppingItem]:
    """Search over name and notes, filter by category, then sort."""
    result = list(items)
    if params.search:
        needle = params.search.casefold()
        result = [item for item in result if _matches(needle, item.name, item.notes)]
    if params.category:
        result = [item for item in result if item.category == params.category]
    return _sort(result, params.sort, allow_category=True)


def project(
    collection: Sequence[E],
    params: SearchParams | None = None,
) -> list[E]:
    """
    Project a homogeneous collection of lists or items.

    Args:
        collection: Lists or items, never a mix
        params: View query; defaults to the unfiltered name-asc view

    Returns:
        A new list; collection itself is left untouched
    """
    params = params or SearchParams()
    if not collection:
        return []
    if isinstance(collection[0], ShoppingItem):
        return project_items(collection, params)
    return project_lists(collection, params)
