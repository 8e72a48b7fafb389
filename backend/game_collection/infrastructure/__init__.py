"""Infrastructure Layer - store adapters, database session management, logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All SQLAlchemy failures are mapped to DatabaseError before leaving this layer
"""
