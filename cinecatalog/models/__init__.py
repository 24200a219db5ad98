"""ORM Models — SQLAlchemy declarative models for all catalogue entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Movie references Genre and Language (many-to-one each)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from cinecatalog.models.genre import Genre  # noqa: F401
from cinecatalog.models.language import Language  # noqa: F401
from cinecatalog.models.movie import Movie  # noqa: F401
