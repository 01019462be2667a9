import logging
import uuid

from fastapi import APIRouter, HTTPException

from app.config import settings
from app.schemas.schedule import ScheduleErrorResponse, ScheduleRequest, ScheduleResponse
from app.services.scheduler import DependencyCycleError, SchedulingError, schedule

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/projects", tags=["schedule"])


@router.post(
    "/{project_id}/schedule",
    response_model=ScheduleResponse,
    responses={400: {"model": ScheduleErrorResponse}},
)
def schedule_tasks(project_id: uuid.UUID, body: ScheduleRequest | None = None):
    """Order a project's tasks so every task follows its dependencies."""
    tasks = body.tasks if body else None
    count = len(tasks) if tasks else 0

    if count > settings.MAX_SCHEDULE_TASKS:
        logger.warning(f"[Schedule] Project {project_id}: {count} tasks exceeds limit {settings.MAX_SCHEDULE_TASKS}")
        raise HTTPException(
            status_code=413,
            detail=f"Too many tasks: {count} (limit {settings.MAX_SCHEDULE_TASKS})",
        )

    try:
        result = schedule(tasks, dedupe_dependencies=settings.SCHEDULER_DEDUPE_DEPENDENCIES)
    except DependencyCycleError as exc:
        logger.warning(f"[Schedule] Project {project_id}: {exc.code} ({len(exc.unresolved)} unresolved)")
        raise HTTPException(
            status_code=400,
            detail=exc.to_detail(include_unresolved=settings.SCHEDULER_REPORT_CYCLE_MEMBERS),
        )
    except SchedulingError as exc:
        logger.warning(f"[Schedule] Project {project_id}: {exc.code}: {exc}")
        raise HTTPException(status_code=400, detail=exc.to_detail())

    logger.info(f"[Schedule] Project {project_id}: ordered {count} tasks over {result.edge_count} edges")
    return ScheduleResponse(recommended_order=result.order)
