"""
Feature modules for the shoplist client state layer.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer and state
- service.py / store.py / client.py: Implementation
- exceptions.py: Module-specific exceptions

Modules:
- gateway: CRUD against the remote store
- session: Token-backed session manager
- auth: Session state store
- shopping: Lists/items/categories state store
- projection: Filtered and sorted views
"""
