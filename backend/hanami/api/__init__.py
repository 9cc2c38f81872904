"""API Layer: FastAPI routes, the envelope wrapper, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint returns the {success, data|error, message?, details?} envelope
"""
