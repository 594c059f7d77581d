"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services await external collaborators, then hand plain values to core functions
    - External errors propagate unchanged (no retries, no re-wrapping)
"""
