"""Pydantic Schemas: request bodies and the response envelope.

Invariants:
    - Schemas validate at the system boundary, before any data access
    - Response records are passed through as dicts; only the envelope is modelled
"""
