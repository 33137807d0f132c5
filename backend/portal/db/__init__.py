"""Database Infrastructure: SQLAlchemy Base shared by models and migrations.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
