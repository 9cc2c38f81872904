"""Services Layer: multi-step procedures that span more than one data call.

Invariants:
    - Services receive a DataAdapter; they never open sessions themselves
"""
