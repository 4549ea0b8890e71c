"""
Remote data gateway module.

Issues CRUD calls against the remote collections (users, shoppingLists,
shoppingItems, categories) and attaches the current bearer token.

Public API:
- RemoteGateway: HTTP entry point exposing one CollectionClient per collection
- ICollectionClient: Interface the stores depend on
- RemoteRequestError: Raised for every transport or HTTP failure
"""

from .interfaces import ICollectionClient
from .client import RemoteGateway, CollectionClient
from .exceptions import RemoteRequestError

__all__ = [
    "ICollectionClient",
    "RemoteGateway",
    "CollectionClient",
    "RemoteRequestError",
]
