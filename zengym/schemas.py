# backend/zengym/schemas.py
"""Request payloads accepted by the API."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class RoutineCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)
    duration_minutes: Optional[int] = Field(default=None, ge=1, le=600)
    exercises: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("exercises")
    @classmethod
    def _drop_blank_exercises(cls, v: List[str]) -> List[str]:
        return [e.strip() for e in v if e and e.strip()]


class RoutineUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)
    duration_minutes: Optional[int] = Field(default=None, ge=1, le=600)
    exercises: Optional[List[str]] = None

    @field_validator("exercises")
    @classmethod
    def _drop_blank_exercises(cls, v):
        if v is None:
            return v
        return [e.strip() for e in v if e and e.strip()]


class SessionCreate(BaseModel):
    routine_id: Optional[int] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0, le=1440)


class SettingsUpdate(BaseModel):
    # Pro status and quota counters are not client-writable
    model_config = ConfigDict(extra="forbid")

    workout_reminder_enabled: Optional[bool] = None
    workout_reminder_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    affirmation_enabled: Optional[bool] = None
    affirmation_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    dark_mode: Optional[bool] = None
    notifications_enabled: Optional[bool] = None


class AskQuestion(BaseModel):
    question: str = Field(min_length=1, max_length=2000)

    @field_validator("question")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question must not be blank")
        return v.strip()


class AffirmationCreate(BaseModel):
    affirmation: str = Field(min_length=1)


def parse(schema, data, message="Invalid request data"):
    """Validate `data` against `schema`, raising our 400 ValidationError."""
    try:
        return schema.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, message) from e
