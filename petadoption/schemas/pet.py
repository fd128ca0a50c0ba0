"""Pet Schemas — pet listing output and the adoption request body.

Invariants:
    - PetResponse mirrors the pets table column-for-column
    - AdoptRequest.adoptee_name is stripped and must be non-empty
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PetResponse(BaseModel):
    """Pet row as returned by GET /pets."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    image: str | None = None
    adopted_by: str | None = None
    adopter_ip: str | None = None


class AdoptRequest(BaseModel):
    """Adoption body — {id, adopteeName}."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    adoptee_name: str = Field(alias="adopteeName", min_length=1, max_length=200)

    @field_validator("adoptee_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("adopteeName cannot be empty or whitespace")
        return v
