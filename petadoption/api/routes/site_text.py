"""Site Text — read and edit the page-details and website-title singletons.

Invariants:
    - Both resources are the id=1 row of their table
    - Updates report affected rows ({"updated": n}) and require an admin session
    - A missing singleton row is a 404, not an empty body
"""

from fastapi import APIRouter, Depends
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from petadoption.api.dependencies import require_admin
from petadoption.core.errors import ResourceNotFoundError
from petadoption.infrastructure.database import get_db
from petadoption.models.site_text import PageDetails, WebsiteTitle, SINGLETON_ID
from petadoption.schemas.site_text import (
    PageDetailsResponse, PageDetailsUpdate,
    WebsiteTitleResponse, WebsiteTitleUpdate,
)

router = APIRouter(tags=["site-text"])


@router.get("/page-details", response_model=PageDetailsResponse)
async def get_page_details(db: AsyncSession = Depends(get_db)):
    page = await db.get(PageDetails, SINGLETON_ID)
    if page is None:
        raise ResourceNotFoundError("Page details", str(SINGLETON_ID))
    return page


@router.put("/update-page-details", dependencies=[Depends(require_admin)])
async def update_page_details(
    body: PageDetailsUpdate, db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        update(PageDetails).where(PageDetails.id == SINGLETON_ID)
        .values(title=body.title, description=body.description)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    return {"updated": result.rowcount}


@router.get("/website-title", response_model=WebsiteTitleResponse)
async def get_website_title(db: AsyncSession = Depends(get_db)):
    site = await db.get(WebsiteTitle, SINGLETON_ID)
    if site is None:
        raise ResourceNotFoundError("Website title", str(SINGLETON_ID))
    return site


@router.put("/update-website-title", dependencies=[Depends(require_admin)])
async def update_website_title(
    body: WebsiteTitleUpdate, db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        update(WebsiteTitle).where(WebsiteTitle.id == SINGLETON_ID)
        .values(title=body.title)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    return {"updated": result.rowcount}
