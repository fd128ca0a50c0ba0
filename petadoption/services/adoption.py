"""Adoption Service — adopt, check, and release pets keyed by adopter IP.

Invariants:
    - One adoption per IP: the adopt UPDATE only matches when no pet already
      carries the caller's IP, so check and write are a single statement
    - The UNIQUE(adopter_ip) constraint backs the conditional update; a
      constraint violation is reported as AlreadyAdoptedError, not a store error
    - Unadopt clears adopted_by and adopter_ip together

Design Decisions:
    - Conditional UPDATE over SELECT-then-UPDATE: concurrent requests from the
      same IP cannot both pass the check
    - A zero-row update is disambiguated afterwards: IP taken → 400; no such
      pet → no-op reported as False (an unknown id is not an error, as with
      remove and update)
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from petadoption.core.errors import AlreadyAdoptedError
from petadoption.models.pet import Pet

logger = logging.getLogger(__name__)


async def has_adopted(db: AsyncSession, ip: str) -> bool:
    """True if any pet is recorded against this IP."""
    result = await db.execute(
        select(Pet.id).where(Pet.adopter_ip == ip).limit(1),
    )
    return result.scalar_one_or_none() is not None


async def adopt_pet(
    db: AsyncSession, pet_id: int, adoptee_name: str, ip: str,
) -> bool:
    """Record an adoption of pet_id by adoptee_name from ip.

    Returns False when no pet has that id.
    """
    other = aliased(Pet)
    ip_taken = select(other.id).where(other.adopter_ip == ip).exists()
    stmt = (
        update(Pet)
        .where(Pet.id == pet_id, ~ip_taken)
        .values(adopted_by=adoptee_name, adopter_ip=ip)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(stmt)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(
            f"Adoption rejected by unique constraint: {e.orig}",
            extra={"pet_id": pet_id, "client_ip": ip},
        )
        raise AlreadyAdoptedError(ip) from e

    if result.rowcount == 0:
        if await has_adopted(db, ip):
            logger.info(
                "Duplicate adoption rejected",
                extra={"pet_id": pet_id, "client_ip": ip},
            )
            raise AlreadyAdoptedError(ip)
        logger.warning(
            f"Adoption of unknown pet {pet_id} ignored",
            extra={"pet_id": pet_id, "client_ip": ip},
        )
        return False

    logger.info(
        f"Pet {pet_id} adopted by {adoptee_name}",
        extra={"pet_id": pet_id, "client_ip": ip},
    )
    return True


async def unadopt_pet(db: AsyncSession, pet_id: int) -> int:
    """Clear the adoption on pet_id; returns rows updated (0 or 1)."""
    result = await db.execute(
        update(Pet)
        .where(Pet.id == pet_id)
        .values(adopted_by=None, adopter_ip=None)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    if result.rowcount:
        logger.info(f"Pet {pet_id} marked as not adopted", extra={"pet_id": pet_id})
    return result.rowcount
