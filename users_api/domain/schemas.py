# users_api/domain/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Request body for creating a user. A missing name is stored as ""."""

    name: str = Field("", description="User name")


class UserRead(BaseModel):
    """Stored user as returned to clients."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
