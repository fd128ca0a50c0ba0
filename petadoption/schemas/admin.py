"""Admin Schemas — login request and issued-token response.

An empty password is a valid request that simply fails authentication (401),
so the admin page reports it as an incorrect password.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AdminLoginRequest(BaseModel):
    password: str


class AdminLoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    expires_at: datetime = Field(serialization_alias="expiresAt")
