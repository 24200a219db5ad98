"""Services Layer — one service class per resource, bound to a request session.

Invariants:
    - Services raise CatalogError subclasses for client-visible failures
    - Services commit their own writes
"""
