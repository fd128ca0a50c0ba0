"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - PageDetails and WebsiteTitle are singleton tables keyed by id=1

Design Decisions:
    - One file per entity (site text singletons share one)
    - All models imported here so Base.metadata is complete before create_all
"""

from petadoption.models.pet import Pet  # noqa: F401
from petadoption.models.site_text import PageDetails, WebsiteTitle  # noqa: F401
from petadoption.models.admin_session import AdminSession  # noqa: F401
