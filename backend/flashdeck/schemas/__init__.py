"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary, before any external call
    - Database rows are returned as-is; only request bodies are modeled
"""
