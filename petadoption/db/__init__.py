"""Database Infrastructure — SQLAlchemy Base and startup seeding.

Invariants:
    - Single async engine per process (owned by DatabaseSessionManager)
    - Seeding is idempotent: re-running startup never duplicates rows
"""
