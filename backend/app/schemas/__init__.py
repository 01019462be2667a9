from app.schemas.schedule import (
    ScheduleError,
    ScheduleErrorResponse,
    ScheduleRequest,
    ScheduleResponse,
    ScheduleTaskInput,
)

__all__ = [
    "ScheduleError",
    "ScheduleErrorResponse",
    "ScheduleRequest",
    "ScheduleResponse",
    "ScheduleTaskInput",
]
