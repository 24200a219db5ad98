"""Infrastructure Layer — database access and logging setup.

Invariants:
    - Infrastructure never imports route or service modules
"""
