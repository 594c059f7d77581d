"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Every schema converts to/from a core dataclass; core never sees pydantic models

Design Decisions:
    - Separate from core models: schemas are API contracts, core models are domain values
"""
