from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Entity(BaseModel):
    """
    Base class for stored entities.

    Entities are frozen: a write replaces the stored object with a new copy,
    so anything handed out earlier keeps the values it was read with.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    created_at: datetime = Field(default_factory=utcnow)
