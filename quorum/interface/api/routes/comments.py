"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from quorum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from quorum.application.usecase.views import CommentView
from quorum.domain.service import JWTService
from quorum.interface.api.auth import require_user_id

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting.

    Exactly one of question_id and answer_id must be given. Body length is
    checked after trimming, so it is not constrained here.
    """

    body: str
    question_id: UUID | None = None
    answer_id: UUID | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    body: str


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    question_id: UUID | None = Query(default=None),
    answer_id: UUID | None = Query(default=None),
) -> ListCommentsResponse:
    """List comments on a question or on an answer, oldest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(question_id=question_id, answer_id=answer_id)
    )


@router.post("", response_model=CommentView, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentView:
    """Comment on a question or an answer.

    Requires authentication.

    Args:
        request: Comment content and target
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created comment
    """
    user_id = require_user_id(jwt_service, auth_token, "comment")
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            author_id=user_id,
            body=request.body,
            question_id=request.question_id,
            answer_id=request.answer_id,
        )
    )


@router.patch("/{comment_id}", response_model=CommentView)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentView:
    """Edit a comment. Author only."""
    user_id = require_user_id(jwt_service, auth_token, "edit comments")
    return await update_comment_use_case.execute(
        UpdateCommentRequest(comment_id=comment_id, user_id=user_id, body=request.body)
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment. Author only."""
    user_id = require_user_id(jwt_service, auth_token, "delete comments")
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
