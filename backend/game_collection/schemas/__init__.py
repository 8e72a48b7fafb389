"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (user input, API responses)
    - Separate from models: schemas are API contracts, models are persistence
"""
