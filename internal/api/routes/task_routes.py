"""
Task API Routes.

Domain errors propagate to the application exception handler, which maps
their kind to an HTTP status code.
"""

from fastapi import APIRouter, Depends, Query, status

from core.logger import get_logger
from internal.api.dependencies.todolist_dependencies import get_todolist_use_case
from internal.api.schemas import (
    CreateTaskRequest,
    StandardResponse,
    TaskView,
    UpdateTaskRequest,
    UpdateTaskStatusRequest,
)
from internal.api.utils import success_response
from services.todolist_use_case import ITodoListUseCase

router = APIRouter(prefix="/api/v1/tasks", tags=["Tasks"])

log = get_logger("task_routes")

MAX_PAGE = 2**31 - 1

_ERRORS = {
    400: {"description": "Invalid identifier or date"},
    404: {"description": "Task not found"},
    500: {"description": "Internal server error"},
}


@router.get(
    "",
    response_model=StandardResponse,
    summary="List Tasks",
    description="Get one page (20 items) of tasks",
    responses={400: {"description": "Page out of range"}, 500: _ERRORS[500]},
)
async def get_tasks(
    page: int = Query(default=1, le=MAX_PAGE, description="1-based page number"),
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    tasks = await use_case.get_tasks(page)
    log.info(f"API: Tasks listed: page={page}, count={len(tasks)}")
    return success_response(
        message="Tasks retrieved successfully",
        data=[TaskView.from_entity(task).model_dump() for task in tasks],
    )


@router.post(
    "",
    response_model=StandardResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
)
async def create_task(
    request: CreateTaskRequest,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    """
    Create a new task.

    **Parameters:**
    - **value**: Task text
    - **due_date**: Optional due date, e.g. `2024-01-01T00:00:00.000Z`
    """
    task = await use_case.create_task(request.value, request.due_date)
    log.info(f"API: Task created: task_id={task.id}")
    return success_response(
        message="Task created successfully",
        data=TaskView.from_entity(task).model_dump(),
    )


@router.get(
    "/{task_id}",
    response_model=StandardResponse,
    summary="Get Task",
    description="Get a task with its comments and labels",
    responses=_ERRORS,
)
async def get_task(
    task_id: str,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    task = await use_case.get_task(task_id)
    return success_response(
        message="Task retrieved successfully",
        data=TaskView.from_entity(task).model_dump(),
    )


@router.put(
    "/{task_id}",
    response_model=StandardResponse,
    summary="Update Task",
    responses=_ERRORS,
)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    """
    Update a task.

    **Parameters:**
    - **value**: New task text
    - **completed**: New completion flag
    - **due_date**: Omit to keep the current due date, send `""` to clear it
    """
    task = await use_case.update_task(
        task_id, request.value, request.completed, request.due_date
    )
    log.info(f"API: Task updated: task_id={task.id}")
    return success_response(
        message="Task updated successfully",
        data=TaskView.from_entity(task).model_dump(),
    )


@router.delete(
    "/{task_id}",
    response_model=StandardResponse,
    summary="Delete Task",
    responses=_ERRORS,
)
async def delete_task(
    task_id: str,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    await use_case.delete_task(task_id)
    log.info(f"API: Task deleted: task_id={task_id}")
    return success_response(message="Task deleted successfully")


@router.patch(
    "/{task_id}/status",
    response_model=StandardResponse,
    summary="Update Task Status",
    responses=_ERRORS,
)
async def update_task_status(
    task_id: str,
    request: UpdateTaskStatusRequest,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    await use_case.update_task_status(task_id, request.completed)
    return success_response(message="Task status updated successfully")
