"""API Schemas — Pydantic models for request validation and response shaping.

Invariants:
    - Validation is presence-only: required fields, non-blank names
    - JSON field names match the wire contract (adopteeName, hasAdopted, expiresAt)
"""
