"""Movie Catalogue Package — REST API for movies, genres and languages.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
