"""Pet ORM — an adoptable animal and its adoption status.

Invariants:
    - id is an integer primary key (SQLite rowid alias)
    - adopted_by and adopter_ip are both NULL or both set
    - adopter_ip is UNIQUE: at most one pet per adopter address
      (NULLs never collide, so any number of pets can be available)
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from petadoption.db.base import Base


class Pet(Base):
    """Adoptable pet listing."""
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    adopted_by: Mapped[str | None] = mapped_column(Text, nullable=True)
    adopter_ip: Mapped[str | None] = mapped_column(
        Text, nullable=True, unique=True,
    )
