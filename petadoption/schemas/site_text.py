"""Site Text Schemas — singleton page details and website title."""

from pydantic import BaseModel, ConfigDict


class PageDetailsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str


class PageDetailsUpdate(BaseModel):
    title: str
    description: str


class WebsiteTitleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class WebsiteTitleUpdate(BaseModel):
    title: str
