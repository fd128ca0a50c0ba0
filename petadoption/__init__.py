"""Pet Adoption Site — FastAPI listing/adoption service over a single SQLite file.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
