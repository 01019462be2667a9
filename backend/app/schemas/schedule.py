from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ScheduleTaskInput(BaseModel):
    title: str = Field(min_length=1)
    estimated_hours: int | None = Field(default=None, ge=1, le=1000)
    due_date: datetime | None = None  # accepted but not used for ordering
    dependencies: list[str] = []

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ScheduleRequest(BaseModel):
    tasks: list[ScheduleTaskInput] | None = None


class ScheduleResponse(BaseModel):
    recommended_order: list[str]

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ScheduleError(BaseModel):
    error: str
    message: str
    task: str | None = None
    missing: str | None = None
    title: str | None = None
    unresolved: list[str] | None = None


class ScheduleErrorResponse(BaseModel):
    detail: ScheduleError
