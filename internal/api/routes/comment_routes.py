"""
Comment API Routes.
"""

from fastapi import APIRouter, Depends, status

from core.logger import get_logger
from internal.api.dependencies.todolist_dependencies import get_todolist_use_case
from internal.api.schemas import CommentView, CreateCommentRequest, StandardResponse
from internal.api.utils import success_response
from services.todolist_use_case import ITodoListUseCase

router = APIRouter(prefix="/api/v1/tasks/{task_id}/comments", tags=["Comments"])

log = get_logger("comment_routes")


@router.get(
    "",
    response_model=StandardResponse,
    summary="List Comments",
    responses={
        400: {"description": "Invalid task identifier"},
        404: {"description": "Task not found"},
        500: {"description": "Internal server error"},
    },
)
async def get_comments(
    task_id: str,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    comments = await use_case.get_comments(task_id)
    return success_response(
        message="Comments retrieved successfully",
        data=[CommentView.from_entity(c).model_dump() for c in comments],
    )


@router.post(
    "",
    response_model=StandardResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Comment",
    responses={
        400: {"description": "Invalid task identifier"},
        404: {"description": "Task not found"},
        500: {"description": "Internal server error"},
    },
)
async def create_comment(
    task_id: str,
    request: CreateCommentRequest,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    comment = await use_case.create_comment(task_id, request.comment)
    log.info(f"API: Comment created: task_id={task_id}, comment_id={comment.id}")
    return success_response(
        message="Comment created successfully",
        data=CommentView.from_entity(comment).model_dump(),
    )


@router.delete(
    "/{comment_id}",
    response_model=StandardResponse,
    summary="Delete Comment",
    responses={
        400: {"description": "Invalid identifier"},
        404: {"description": "Comment not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_comment(
    task_id: str,
    comment_id: str,
    use_case: ITodoListUseCase = Depends(get_todolist_use_case),
):
    await use_case.delete_comment(task_id, comment_id)
    log.info(f"API: Comment deleted: task_id={task_id}, comment_id={comment_id}")
    return success_response(message="Comment deleted successfully")
