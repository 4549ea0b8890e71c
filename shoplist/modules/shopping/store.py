"""
Shopping state store.

Owns the normalized cache (lists, items, categories, current_list) and
applies the lifecycle outcomes of list/item/category operations against
the remote store.

Consistency rules enforced here rather than by the remote store:
- update replaces the entity by id and refreshes current_list if it matches
- deleting a list deletes its items remotely, then drops them locally
- fetching a list's items replaces that list's cached items wholesale

loading and error are shared by every action; only the most recent
action's outcome is visible.
"""

import asyncio
import logging
from typing import Optional, Union, TYPE_CHECKING

from shoplist.shared.actions import ActionResult, ActionStore
from shoplist.shared.exceptions import ValidationError
from shoplist.modules.gateway.exceptions import RemoteRequestError
from shoplist.modules.session.interfaces import ISessionManager
from shoplist.modules.session.exceptions import NotAuthenticatedError

from .models import (
    Category,
    ShoppingItem,
    ShoppingItemCreate,
    ShoppingItemUpdate,
    ShoppingList,
    ShoppingListCreate,
    ShoppingListUpdate,
    ShoppingState,
)
from .exceptions import ShoppingItemNotFoundError, ShoppingListNotFoundError

if TYPE_CHECKING:
    from shoplist.modules.gateway.interfaces import ICollectionClient

logger = logging.getLogger(__name__)


class ShoppingStore(ActionStore):
    """
    Store for the shopping domain.

    Collections are always replaced with new lists, never mutated in place,
    so earlier snapshots handed to callers stay consistent.
    """

    name = "shopping"

    def __init__(
        self,
        lists: "ICollectionClient[ShoppingList]",
        items: "ICollectionClient[ShoppingItem]",
        categories: "ICollectionClient[Category]",
        session: ISessionManager,
    ):
        self._lists = lists
        self._items = items
        self._categories = categories
        self._session = session
        self._state = ShoppingState()

    @property
    def state(self) -> ShoppingState:
        return self._state

    def _require_user_id(self) -> str:
        user_id = self._session.current_user_id()
        if not user_id:
            raise NotAuthenticatedError()
        return user_id

    def _find_list(self, list_id: str) -> Optional[ShoppingList]:
        return next((lst for lst in self._state.lists if lst.id == list_id), None)

    def _find_item(self, item_id: str) -> Optional[ShoppingItem]:
        return next((item for item in self._state.items if item.id == item_id), None)

    # -------------------------------------------------------------------------
    # Lifecycle apply steps
    # -------------------------------------------------------------------------

    def _apply_pending(self, action: str) -> None:
        self._state.loading = True
        self._state.error = None

    def _apply_rejected(self, action: str, message: str) -> None:
        # Collections are only touched on success, so there is nothing to roll back
        self._state.loading = False
        self._state.error = message

    def _settle(self) -> None:
        self._state.loading = False
        self._state.error = None

    def _apply_lists_fetched(self, lists: list[ShoppingList]) -> None:
        self._settle()
        self._state.lists = list(lists)
        current = self._state.current_list
        if current is not None:
            self._state.current_list = self._find_list(current.id)

    def _apply_list_created(self, created: ShoppingList) -> None:
        self._settle()
        self._state.lists = [*self._state.lists, created]

    def _apply_list_updated(self, updated: ShoppingList) -> None:
        self._settle()
        self._state.lists = [
            updated if lst.id == updated.id else lst for lst in self._state.lists
        ]
        current = self._state.current_list
        if current is not None and current.id == updated.id:
            self._state.current_list = updated

    def _apply_list_deleted(self, list_id: str) -> None:
        self._settle()
        self._state.lists = [lst for lst in self._state.lists if lst.id != list_id]
        current = self._state.current_list
        if current is not None and current.id == list_id:
            self._state.current_list = None
        self._state.items = [item for item in self._state.items if item.list_id != list_id]

    def _apply_items_fetched(self, fetched: tuple[str, list[ShoppingItem]]) -> None:
        list_id, items = fetched
        self._settle()
        kept = [item for item in self._state.items if item.list_id != list_id]
        self._state.items = kept + list(items)

    def _apply_item_created(self, created: ShoppingItem) -> None:
        self._settle()
        self._state.items = [*self._state.items, created]

    def _apply_item_updated(self, updated: ShoppingItem) -> None:
        self._settle()
        self._state.items = [
            updated if item.id == updated.id else item for item in self._state.items
        ]

    def _apply_item_deleted(self, item_id: str) -> None:
        self._settle()
        self._state.items = [item for item in self._state.items if item.id != item_id]

    def _apply_search_results(self, items: list[ShoppingItem]) -> None:
        self._settle()
        self._state.items = list(items)

    def _apply_categories_fetched(self, categories: list[Category]) -> None:
        self._settle()
        self._state.categories = list(categories)

    # -------------------------------------------------------------------------
    # List actions
    # -------------------------------------------------------------------------

    async def fetch_lists(self) -> ActionResult[list[ShoppingList]]:
        async def operation() -> list[ShoppingList]:
            user_id = self._require_user_id()
            return await self._lists.find(user_id=user_id)

        return await self._dispatch(
            "fetchLists",
            operation,
            self._apply_lists_fetched,
            fallback_message="Failed to fetch shopping lists",
        )

    async def create_list(self, data: ShoppingListCreate) -> ActionResult[ShoppingList]:
        async def operation() -> ShoppingList:
            user_id = self._require_user_id()
            return await self._lists.create(data, user_id=user_id, shared_with=[])

        return await self._dispatch(
            "createList",
            operation,
            self._apply_list_created,
            fallback_message="Failed to create shopping list",
        )

    async def update_list(
        self,
        list_id: str,
        updates: ShoppingListUpdate,
    ) -> ActionResult[ShoppingList]:
        return await self._dispatch(
            "updateList",
            lambda: self._lists.update(list_id, updates),
            self._apply_list_updated,
            fallback_message="Failed to update shopping list",
        )

    async def delete_list(self, list_id: str) -> ActionResult[str]:
        """
        Delete a list and cascade to its items.

        The list is deleted remotely first, then its remote items are
        fetched and deleted concurrently. The local cache is only touched
        once every one of those calls has settled.

        A list that is already gone remotely (404) still has its items
        cascaded, so a retry after a partial failure can finish the job.
        """

        async def operation() -> str:
            try:
                await self._lists.delete(list_id)
            except RemoteRequestError as e:
                if e.status_code != 404:
                    raise
                logger.info(f"List {list_id} already deleted remotely, cascading to items")
            children = await self._items.find(list_id=list_id)
            outcomes = await asyncio.gather(
                *(self._items.delete(item.id) for item in children),
                return_exceptions=True,
            )
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    raise outcome
            logger.debug(f"Deleted list {list_id} and {len(children)} item(s)")
            return list_id

        return await self._dispatch(
            "deleteList",
            operation,
            self._apply_list_deleted,
            fallback_message="Failed to delete shopping list",
        )

    async def share_list(self, list_id: str, email: str) -> ActionResult[ShoppingList]:
        """
        Add an email to a list's shared_with.

        Works from the remote copy of the list, not the cache. An email
        that is already present (ignoring case) is not added twice.
        """
        email = email.strip()

        async def operation() -> ShoppingList:
            if not email:
                raise ValidationError("Email is required", code="EMAIL_REQUIRED")
            remote = await self._lists.get(list_id)
            if email.casefold() in (shared.casefold() for shared in remote.shared_with):
                logger.debug(f"List {list_id} already shared with {email}")
                return remote
            return await self._lists.update(
                list_id,
                ShoppingListUpdate(shared_with=[*remote.shared_with, email]),
            )

        return await self._dispatch(
            "shareList",
            operation,
            self._apply_list_updated,
            fallback_message="Failed to share shopping list",
        )

    # -------------------------------------------------------------------------
    # Item actions
    # -------------------------------------------------------------------------

    async def fetch_items(self, list_id: str) -> ActionResult[tuple[str, list[ShoppingItem]]]:
        """
        Snapshot-merge the remote items of one list into the cache.

        Applied even if the selected list changed while the request was in
        flight; the merge only ever replaces items of list_id.
        """

        async def operation() -> tuple[str, list[ShoppingItem]]:
            return list_id, await self._items.find(list_id=list_id)

        return await self._dispatch(
            "fetchItems",
            operation,
            self._apply_items_fetched,
            fallback_message="Failed to fetch shopping items",
        )

    async def create_item(
        self,
        list_id: str,
        data: ShoppingItemCreate,
    ) -> ActionResult[ShoppingItem]:
        async def operation() -> ShoppingItem:
            if self._find_list(list_id) is None:
                raise ShoppingListNotFoundError(list_id)
            return await self._items.create(data, list_id=list_id, completed=False)

        return await self._dispatch(
            "createItem",
            operation,
            self._apply_item_created,
            fallback_message="Failed to create shopping item",
        )

    async def update_item(
        self,
        item_id: str,
        updates: ShoppingItemUpdate,
    ) -> ActionResult[ShoppingItem]:
        return await self._dispatch(
            "updateItem",
            lambda: self._items.update(item_id, updates),
            self._apply_item_updated,
            fallback_message="Failed to update shopping item",
        )

    async def toggle_item_complete(self, item_id: str) -> ActionResult[ShoppingItem]:
        async def operation() -> ShoppingItem:
            item = self._find_item(item_id)
            if item is None:
                raise ShoppingItemNotFoundError(item_id)
            return await self._items.update(
                item_id, ShoppingItemUpdate(completed=not item.completed)
            )

        return await self._dispatch(
            "updateItem",
            operation,
            self._apply_item_updated,
            fallback_message="Failed to update shopping item",
        )

    async def delete_item(self, item_id: str) -> ActionResult[str]:
        async def operation() -> str:
            await self._items.delete(item_id)
            return item_id

        return await self._dispatch(
            "deleteItem",
            operation,
            self._apply_item_deleted,
            fallback_message="Failed to delete shopping item",
        )

    async def search_items(self, term: str) -> ActionResult[list[ShoppingItem]]:
        """Find items by name across every list the user owns."""
        needle = term.casefold()

        async def operation() -> list[ShoppingItem]:
            user_id = self._require_user_id()
            lists = await self._lists.find(user_id=user_id)
            per_list = await asyncio.gather(
                *(self._items.find(list_id=lst.id) for lst in lists)
            )
            return [
                item
                for items in per_list
                for item in items
                if needle in item.name.casefold()
            ]

        return await self._dispatch(
            "searchItems",
            operation,
            self._apply_search_results,
            fallback_message="Failed to search items",
        )

    # -------------------------------------------------------------------------
    # Category actions
    # -------------------------------------------------------------------------

    async def fetch_categories(self) -> ActionResult[list[Category]]:
        return await self._dispatch(
            "fetchCategories",
            self._categories.list_all,
            self._apply_categories_fetched,
            fallback_message="Failed to fetch categories",
        )

    # -------------------------------------------------------------------------
    # Synchronous reducers
    # -------------------------------------------------------------------------

    def set_current_list(self, selection: Union[ShoppingList, str, None]) -> None:
        """
        Select a cached list (by entity or id), or clear the selection.

        Raises:
            ShoppingListNotFoundError: if the list is not in the cache
        """
        if selection is None:
            self._state.current_list = None
            return

        list_id = selection if isinstance(selection, str) else selection.id
        cached = self._find_list(list_id)
        if cached is None:
            raise ShoppingListNotFoundError(list_id)
        self._state.current_list = cached

    def clear_error(self) -> None:
        self._state.error = None

    def set_loading(self, loading: bool) -> None:
        self._state.loading = loading

    def clear_items(self) -> None:
        self._state.items = []
