"""
Async action lifecycle shared by the state stores.

Every store action runs through three phases:
- pending: the store marks itself loading and clears its error
- fulfilled: the store applies the payload to its state
- rejected: the store records the error message and stops loading

Apply steps are plain synchronous callables, so under asyncio they run to
completion without interleaving with another action's apply step. The
only suspension point is the awaited operation itself.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from .exceptions import ShoplistError

logger = logging.getLogger(__name__)

P = TypeVar("P")


class ActionPhase(str, Enum):
    """Lifecycle phase of one async action."""

    PENDING = "pending"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ActionResult(Generic[P]):
    """What a store action hands back to its caller. Actions never raise."""

    type: str
    phase: ActionPhase
    payload: Optional[P] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.phase == ActionPhase.FULFILLED


class ActionStore(ABC):
    """
    Base class for stores built from lifecycle-driven async actions.

    Subclasses provide _apply_pending and _apply_rejected for the shared
    state flags and pass a per-action fulfilled handler to _dispatch.
    """

    name: str = "store"

    @abstractmethod
    def _apply_pending(self, action: str) -> None:
        """Mark the store loading and clear its error."""
        pass

    @abstractmethod
    def _apply_rejected(self, action: str, message: str) -> None:
        """Record a failure message and stop loading."""
        pass

    async def _dispatch(
        self,
        action: str,
        operation: Callable[[], Awaitable[P]],
        on_fulfilled: Callable[[P], None],
        fallback_message: str,
        on_rejected: Optional[Callable[[str], None]] = None,
    ) -> ActionResult[P]:
        """
        Run one action through its lifecycle.

        Args:
            action: Short action name, e.g. "createList"
            operation: Zero-argument coroutine factory doing the remote work
            on_fulfilled: Applies the payload to the state
            fallback_message: Used when the failure carries no message
            on_rejected: Replaces the store-wide rejected handler for
                         actions with a special failure contract

        Returns:
            ActionResult in the fulfilled or rejected phase
        """
        action_type = f"{self.name}/{action}"
        self._apply_pending(action)

        try:
            payload = await operation()
        except ShoplistError as e:
            message = e.message or fallback_message
        except Exception as e:
            logger.exception(f"{action_type} failed unexpectedly")
            message = str(e) or fallback_message
        else:
            on_fulfilled(payload)
            return ActionResult(action_type, ActionPhase.FULFILLED, payload=payload)

        if on_rejected is not None:
            on_rejected(message)
        else:
            self._apply_rejected(action, message)
        logger.warning(f"{action_type} rejected: {message}")
        return ActionResult(action_type, ActionPhase.REJECTED, error=message)

