"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure imports only errors and model types from core/, never domain rules
    - All external failures mapped to ExternalServiceError subclasses

Design Decisions:
    - Thin clients implementing core/repository_protocols.py
"""
