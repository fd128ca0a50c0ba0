"""Site Text ORM — editable singleton rows shown on the public page.

Invariants:
    - Each table holds exactly one row, id=1, created by startup seeding
    - Rows are updated in place and never deleted
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from petadoption.db.base import Base

SINGLETON_ID = 1


class PageDetails(Base):
    """Blurb (heading + paragraph) above the pet grid."""
    __tablename__ = "page_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")


class WebsiteTitle(Base):
    """Site-wide heading."""
    __tablename__ = "website_title"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
