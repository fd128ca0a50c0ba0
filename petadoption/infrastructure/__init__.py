"""Infrastructure Layer — database, outbound HTTP clients, file storage, logging.

Invariants:
    - Infrastructure never imports from api/ or views/
    - Outbound failures are mapped to core/errors.py types or logged, never leaked raw
"""
