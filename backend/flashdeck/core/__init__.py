"""Core Layer — pure domain logic, no IO, no async, no SDK imports.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic
"""
