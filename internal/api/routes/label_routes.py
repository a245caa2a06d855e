"""
Label API Routes.
"""

from fastapi import APIRouter, Depends, status

from core.logger import get_logger
from internal.api.dependencies.todolist_dependencies import get_todolist_use_case
from internal.api.schemas import CreateLabelRequest, LabelView, StandardResponse
from internal.api.utils import success_response
from services.todolist_use_case import ITodoListUseCase

router = APIRouter(prefix="/api/v1/tasks/{task_id}/labels", tags=["Labels"])

log = get_logger("label_routes")


@router.get(
    "",
    response_model=StandardResponse,
    summary="List Labels",
    responses={
        400: {"description": "Invalid task identifier"},
        404: {"description": "Task not found"},
        500: {"description": "Internal server error"},
    },
)
async def get_labels(
    task_id: str,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    labels = await use_case.get_labels(task_id)
    return success_response(
        message="Labels retrieved successfully",
        data=[LabelView.from_entity(label).model_dump() for label in labels],
    )


@router.post(
    "",
    response_model=StandardResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Label",
    responses={
        400: {"description": "Invalid task identifier"},
        404: {"description": "Task not found"},
        409: {"description": "Label already exists on the task"},
        500: {"description": "Internal server error"},
    },
)
async def create_label(
    task_id: str,
    request: CreateLabelRequest,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    """
    Attach a label to a task.

    Labels are case-insensitive: `URGENT` and `urgent` are the same label.
    """
    label = await use_case.create_label(task_id, request.label)
    log.info(f"API: Label created: task_id={task_id}, label_id={label.id}")
    return success_response(
        message="Label created successfully",
        data=LabelView.from_entity(label).model_dump(),
    )


@router.delete(
    "/{label_id}",
    response_model=StandardResponse,
    summary="Delete Label",
    responses={
        400: {"description": "Invalid identifier"},
        404: {"description": "Label not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_label(
    task_id: str,
    label_id: str,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    await use_case.delete_label(task_id, label_id)
    log.info(f"API: Label deleted: task_id={task_id}, label_id={label_id}")
    return success_response(message="Label deleted successfully")
