"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Thin routes: parsing and response shaping only, logic lives in services/
"""
