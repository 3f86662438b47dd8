"""Base models and enums."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )


class FrozenSchema(BaseSchema):
    """Schema whose instances cannot be changed after creation."""

    model_config = ConfigDict(frozen=True)


class StepStatus(str, Enum):
    """Checklist step execution status."""

    PENDING = "pending"
    COMPLETED = "completed"
    ERROR = "error"
    SKIPPED = "skipped"
