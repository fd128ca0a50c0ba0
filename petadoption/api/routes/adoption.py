"""Adoption — IP-keyed adopt/unadopt, adoption checks, and public IP lookup.

Invariants:
    - POST /adopt attributes the adoption to the caller's resolved IP, never to
      a client-supplied value
    - A second adoption from the same IP → 400 "You have already adopted a pet"
    - The Telegram notice is a background task: it runs after the response is
      sent and its failure never changes the response
    - An unknown pet id is acknowledged like the other writes and sends no notice
    - PUT /unadopt-animal/{id} requires an admin session
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petadoption.api.dependencies import (
    get_client_ip, get_ip_lookup, get_notifier, require_admin,
)
from petadoption.infrastructure.database import get_db
from petadoption.infrastructure.ip_lookup import IpLookupClient
from petadoption.infrastructure.telegram import TelegramNotifier
from petadoption.schemas.pet import AdoptRequest
from petadoption.services.adoption import adopt_pet, has_adopted, unadopt_pet

logger = logging.getLogger(__name__)
router = APIRouter(tags=["adoption"])


@router.get("/check-adoption/{ip}")
async def check_adoption(ip: str, db: AsyncSession = Depends(get_db)):
    """Whether the given IP already adopted a pet."""
    logger.info(f"Checking adoption status for IP: {ip}", extra={"client_ip": ip})
    return {"hasAdopted": await has_adopted(db, ip)}


@router.post("/adopt")
async def adopt(
    body: AdoptRequest,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    client_ip: str = Depends(get_client_ip),
    notifier: TelegramNotifier = Depends(get_notifier),
):
    if await adopt_pet(db, body.id, body.adoptee_name, client_ip):
        background_tasks.add_task(
            notifier.notify_adoption, body.id, body.adoptee_name, client_ip,
        )
    return {"message": "Pet adopted successfully"}


@router.put("/unadopt-animal/{pet_id}", dependencies=[Depends(require_admin)])
async def unadopt_animal(pet_id: int, db: AsyncSession = Depends(get_db)):
    return {"updated": await unadopt_pet(db, pet_id)}


@router.get("/get-ip")
async def get_ip(ip_lookup: IpLookupClient = Depends(get_ip_lookup)):
    """Public IP as reported by the external lookup service."""
    return await ip_lookup.lookup()
