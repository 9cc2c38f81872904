"""Infrastructure Layer: database pools, data access adapter and logging.

Invariants:
    - Driver exceptions never leave this layer untranslated (AdapterError)
    - Nothing here knows about HTTP or the response envelope
"""
