"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Each route declares its trust tier through its adapter dependency
    - Each route performs one logical data-access call (progress init excepted)
"""
