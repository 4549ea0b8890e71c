"""
Shopping module exceptions.
"""

from shoplist.shared.exceptions import NotFoundError


class ShoppingListNotFoundError(NotFoundError):
    """Raised when a list id is not present in the store."""

    def __init__(self, list_id: str):
        super().__init__(
            f"Shopping list not found: {list_id}",
            code="SHOPPING_LIST_NOT_FOUND",
            details={"list_id": list_id},
        )


class ShoppingItemNotFoundError(NotFoundError):
    """Raised when an item id is not present in the store."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Shopping item not found: {item_id}",
            code="SHOPPING_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )
