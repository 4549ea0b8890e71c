"""
Projection module data models.
"""

from enum import Enum
from typing import Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field


class SortKey(str, Enum):
    """Sort orders a view can be projected with."""

    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    CATEGORY = "category"  # Items only


DEFAULT_SORT = SortKey.NAME_ASC


class SearchParams(BaseModel):
    """
    View query: free-text search, sort order and category filter.

    sort is None when the caller asked for a key we do not know; such a
    view keeps the input order.
    """

    model_config = ConfigDict(frozen=True)

    search: str = Field(default="", description="Case-insensitive substring")
    sort: Optional[SortKey] = Field(default=DEFAULT_SORT, description="Sort order")
    category: str = Field(default="", description="Exact category name (items only)")

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "SearchParams":
        """
        Build params from query-string style values.

        Missing or empty values fall back to the default view.
        """
        raw_sort = query.get("sort") or DEFAULT_SORT.value
        try:
            sort: Optional[SortKey] = SortKey(raw_sort)
        except ValueError:
            sort = None

        return cls(
            search=query.get("search") or "",
            sort=sort,
            category=query.get("category") or "",
        )

    @property
    def has_active_filters(self) -> bool:
        """True when the view differs from the default one."""
        return bool(self.search) or self.sort != DEFAULT_SORT or bool(self.category)
