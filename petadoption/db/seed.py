"""Startup Seeding — default pets and site text for a fresh database.

Invariants:
    - Pets are inserted only into an empty table, unless reset_pets is set
      (reset wipes every pet, adoptions included, then re-inserts the defaults)
    - PageDetails and WebsiteTitle singleton rows (id=1) are created if absent,
      never overwritten
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petadoption.models.pet import Pet
from petadoption.models.site_text import PageDetails, WebsiteTitle, SINGLETON_ID

logger = logging.getLogger(__name__)

DEFAULT_PETS: tuple[dict, ...] = (
    {"id": 1, "name": "Buddy", "description": "Friendly dog looking for a home.", "image": "/images/1.jpg"},
    {"id": 2, "name": "Luna", "description": "A sweet pup who loves to cuddle.", "image": "/images/2.png"},
    {"id": 3, "name": "Charlie", "description": "Energetic and playful pup.", "image": "/images/3.jpg"},
    {"id": 4, "name": "Max", "description": "Loyal and loving dog.", "image": "/images/4.png"},
    {"id": 5, "name": "Bella", "description": "Gentle and affectionate good boy.", "image": "/images/5.png"},
    {"id": 6, "name": "Lucy", "description": "Playful and curious puppy.", "image": "/images/6.jpg"},
)

DEFAULT_PAGE_TITLE = "Welcome to the Pet Adoption Center"
DEFAULT_PAGE_DESCRIPTION = (
    "Here you can find a variety of pets looking for a loving home. "
    "Browse through the list of available pets and adopt one today!"
)
DEFAULT_WEBSITE_TITLE = "Pet Adoption Site"


async def seed_database(db: AsyncSession, reset_pets: bool = False) -> None:
    """Insert default rows where missing and commit."""
    if reset_pets:
        await db.execute(delete(Pet))
        logger.info("Cleared pets table before seeding")

    pet_count = await db.scalar(select(func.count()).select_from(Pet))
    if reset_pets or not pet_count:
        db.add_all(Pet(**pet) for pet in DEFAULT_PETS)
        logger.info(f"Seeded {len(DEFAULT_PETS)} default pets")

    if await db.get(PageDetails, SINGLETON_ID) is None:
        db.add(PageDetails(
            id=SINGLETON_ID,
            title=DEFAULT_PAGE_TITLE,
            description=DEFAULT_PAGE_DESCRIPTION,
        ))
    if await db.get(WebsiteTitle, SINGLETON_ID) is None:
        db.add(WebsiteTitle(id=SINGLETON_ID, title=DEFAULT_WEBSITE_TITLE))

    await db.commit()
