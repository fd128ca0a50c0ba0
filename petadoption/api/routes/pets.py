"""Pet Listings — list, add, edit and remove pets.

Invariants:
    - GET /pets returns every pet ordered by id, adoption fields included
    - Add requires name, description and an image upload
    - Update replaces the image only when a new file is uploaded
    - An upload whose row write fails or matches no pet is discarded
    - Remove/update report affected row counts (0 for unknown ids, never 404)
    - Mutations require an admin session (require_admin)
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petadoption.api.dependencies import get_image_store, require_admin
from petadoption.core.storage_protocols import ImageStore
from petadoption.infrastructure.database import get_db
from petadoption.models.pet import Pet
from petadoption.schemas.pet import PetResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["pets"])


def _has_upload(image: UploadFile | None) -> bool:
    return image is not None and bool(image.filename)


@router.get("/pets", response_model=list[PetResponse])
async def list_pets(db: AsyncSession = Depends(get_db)):
    """All pets with their adoption status."""
    result = await db.execute(select(Pet).order_by(Pet.id))
    return result.scalars().all()


@router.post("/add-animal", dependencies=[Depends(require_admin)])
async def add_animal(
    name: str = Form(..., min_length=1),
    description: str = Form(...),
    image: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
):
    """Store the uploaded image and insert a new pet."""
    image_url = await image_store.save(image.filename or "", await image.read())
    pet = Pet(name=name, description=description, image=image_url)
    db.add(pet)
    try:
        await db.commit()
    except SQLAlchemyError:
        await image_store.discard(image_url)
        raise
    logger.info(f"Added pet {pet.name}", extra={"pet_id": pet.id})
    return {"id": pet.id}


@router.delete("/remove-animal/{pet_id}", dependencies=[Depends(require_admin)])
async def remove_animal(pet_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        delete(Pet).where(Pet.id == pet_id)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    if result.rowcount:
        logger.info(f"Removed pet {pet_id}", extra={"pet_id": pet_id})
    return {"deleted": result.rowcount}


@router.put("/update-animal/{pet_id}", dependencies=[Depends(require_admin)])
async def update_animal(
    pet_id: int,
    name: str = Form(..., min_length=1),
    description: str = Form(...),
    image: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
    image_store: ImageStore = Depends(get_image_store),
):
    """Update name/description, and the image if a new one was uploaded."""
    values = {"name": name, "description": description}
    if _has_upload(image):
        values["image"] = await image_store.save(image.filename, await image.read())
    try:
        result = await db.execute(
            update(Pet).where(Pet.id == pet_id).values(**values)
            .execution_options(synchronize_session=False),
        )
        await db.commit()
    except SQLAlchemyError:
        if "image" in values:
            await image_store.discard(values["image"])
        raise
    if not result.rowcount and "image" in values:
        await image_store.discard(values["image"])
    return {"updated": result.rowcount}
