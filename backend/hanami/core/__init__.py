"""Core Layer: pure values and functions shared by every other layer, no IO.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
