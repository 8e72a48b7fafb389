"""ORM Models - SQLAlchemy declarative models for the game collection.

Invariants:
    - All models inherit from Base (db/base.py)
    - Game is the aggregate root; genre/platform rows are owned by their game

Design Decisions:
    - All models imported here so string-based relationship() references resolve
      before any query runs
"""

from game_collection.models.game import Game, GameGenre, GamePlatform  # noqa: F401
