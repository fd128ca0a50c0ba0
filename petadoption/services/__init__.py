"""Services — multi-statement operations shared by route handlers.

Invariants:
    - Services receive an AsyncSession; they never open their own
    - Services raise core/errors.py types, never HTTPException
"""
