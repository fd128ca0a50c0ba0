"""Boundary Protocols — contracts between route handlers and storage collaborators.

Invariants:
    - Handlers depend on the Protocol, never on a concrete store
    - save() returns a reference the browser can fetch (path or URL)
    - discard() takes a reference from save() and never raises

Design Decisions:
    - Protocol over ABC: structural subtyping, an object-store backend needs no
      inheritance from the filesystem one
"""

from typing import Protocol


class ImageStore(Protocol):
    """Stores uploaded pet images."""
    async def save(self, original_filename: str, data: bytes) -> str: ...

    async def discard(self, reference: str) -> None: ...
