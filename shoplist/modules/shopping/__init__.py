"""
Shopping module.

Normalized cache of lists, items and categories, kept in sync with the
remote store through lifecycle-driven actions.

Public API:
- ShoppingStore: The store and its actions
- ShoppingState: The cached collections plus current_list/loading/error
- ShoppingList, ShoppingItem, Category and their create/update payloads
- ShoppingListNotFoundError, ShoppingItemNotFoundError
"""

from .models import (
    ShoppingList,
    ShoppingListCreate,
    ShoppingListUpdate,
    ShoppingItem,
    ShoppingItemCreate,
    ShoppingItemUpdate,
    Category,
    ShoppingState,
)
from .store import ShoppingStore
from .exceptions import ShoppingListNotFoundError, ShoppingItemNotFoundError

__all__ = [
    "ShoppingStore",
    # Models
    "ShoppingList",
    "ShoppingListCreate",
    "ShoppingListUpdate",
    "ShoppingItem",
    "ShoppingItemCreate",
    "ShoppingItemUpdate",
    "Category",
    "ShoppingState",
    # Exceptions
    "ShoppingListNotFoundError",
    "ShoppingItemNotFoundError",
]
