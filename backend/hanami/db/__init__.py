"""Database Infrastructure: SQLAlchemy Base and helpers shared by ORM models and migrations.

Invariants:
    - All sessions are async (AsyncSession)
    - Engines live in infrastructure/database.py, one per trust tier
"""
