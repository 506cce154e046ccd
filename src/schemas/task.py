"""Task schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """Create a new task."""

    model_config = ConfigDict(populate_by_name=True)

    owner_id: str | None = Field(None, alias="userId")
    title: str | None = Field(None, alias="titulo")
    description: str | None = Field(None, alias="descricao")
    scheduled: str | None = Field(None, alias="horario")


class TaskUpdate(BaseModel):
    """Update a task. Only non-empty fields are applied."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, alias="titulo")
    description: str | None = Field(None, alias="descricao")
    scheduled: str | None = Field(None, alias="horario")


class TaskResponse(BaseModel):
    """Task as returned by the list endpoint."""

    id: str
    ownerId: str  # noqa: N815
    title: str
    description: str
    scheduledAt: str  # noqa: N815


class TaskCreatedResponse(BaseModel):
    message: str
    id: str


class MessageResponse(BaseModel):
    message: str
