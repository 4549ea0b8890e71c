"""
Shopping module data models.

Entities mirror the remote `shoppingLists`, `shoppingItems` and `categories`
collections. ShoppingState is the normalized in-memory cache owned by the
ShoppingStore.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shoplist.shared.models import WireModel, Patch


class ShoppingList(WireModel):
    """A shopping list owned by one user and optionally shared by email."""

    id: str = Field(..., description="List ID")
    user_id: str = Field(..., description="Owner user ID")
    name: str = Field(..., description="List name")
    description: str = Field(default="", description="Free-text description")
    shared_with: list[str] = Field(
        default_factory=list,
        description="Emails the list is shared with",
    )
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last update time")


class ShoppingListCreate(WireModel):
    """Request to create a new list."""

    name: str = Field(..., min_length=1, description="List name")
    description: str = Field(default="", description="Free-text description")


class ShoppingListUpdate(Patch):
    """Partial list update. user_id is deliberately absent: ownership is fixed."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    shared_with: Optional[list[str]] = None


class ShoppingItem(WireModel):
    """An item on a shopping list."""

    id: str = Field(..., description="Item ID")
    list_id: str = Field(..., description="Owning list ID")
    name: str = Field(..., description="Item name")
    quantity: int = Field(default=1, ge=1, description="How many to buy")
    category: str = Field(default="", description="Category name")
    notes: str = Field(default="", description="Free-text notes")
    image_url: str = Field(default="", description="Optional image URL")
    completed: bool = Field(default=False, description="Already in the cart")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last update time")


class ShoppingItemCreate(WireModel):
    """Request to add an item to a list."""

    name: str = Field(..., min_length=1, description="Item name")
    quantity: int = Field(default=1, ge=1, description="How many to buy")
    category: str = Field(..., description="Category name")
    notes: str = Field(default="", description="Free-text notes")
    image_url: str = Field(default="", description="Optional image URL")


class ShoppingItemUpdate(Patch):
    """Partial item update."""

    name: Optional[str] = Field(None, min_length=1)
    quantity: Optional[int] = Field(None, ge=1)
    category: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None
    completed: Optional[bool] = None


class Category(WireModel):
    """A read-only item category."""

    id: str = Field(..., description="Category ID")
    name: str = Field(..., description="Unique category name")
    color: str = Field(default="", description="Display color")


class ShoppingState(BaseModel):
    """
    Normalized cache of the shopping domain.

    Collections are replaced, never mutated in place, so a reference
    obtained earlier stays a consistent snapshot.
    """

    lists: list[ShoppingList] = Field(default_factory=list)
    items: list[ShoppingItem] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    current_list: Optional[ShoppingList] = None
    loading: bool = False
    error: Optional[str] = None
