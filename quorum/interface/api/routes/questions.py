"""Question routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from quorum.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    LikeQuestionRequest,
    LikeQuestionResponse,
    LikeQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from quorum.application.usecase.views import QuestionView
from quorum.domain.repository import QuestionSortOrder
from quorum.domain.service import JWTService
from quorum.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list, max_length=10)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question; omitted fields stay as they are."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    body: str | None = Field(default=None, min_length=1)
    tags: list[str] | None = Field(default=None, max_length=10)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.RECENT),
    search: str | None = Query(default=None, max_length=200),
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List questions with sorting, search and pagination.

    Authentication is optional; signed-in users see their own vote and like.
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            sort=sort,
            search=search,
            limit=limit,
            offset=offset,
            user_id=optional_user_id(jwt_service, auth_token),
        )
    )


@router.post("", response_model=QuestionView, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Ask a new question.

    Requires authentication.

    Args:
        request: Question content
        create_question_use_case: Create question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created question
    """
    user_id = require_user_id(jwt_service, auth_token, "ask questions")
    question = await create_question_use_case.execute(
        CreateQuestionRequest(
            author_id=user_id,
            title=request.title,
            body=request.body,
            tags=request.tags,
        )
    )
    logfire.info("Question created via API", question_id=question.question_id)
    return question


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Question detail with its answers. Counts one view."""
    return await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=question_id,
            user_id=optional_user_id(jwt_service, auth_token),
        )
    )


@router.patch("/{question_id}", response_model=QuestionView)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionView:
    """Edit a question. Only the author may edit."""
    user_id = require_user_id(jwt_service, auth_token, "edit questions")
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=question_id,
            user_id=user_id,
            title=request.title,
            body=request.body,
            tags=request.tags,
        )
    )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question with its answers and comments. Author only."""
    user_id = require_user_id(jwt_service, auth_token, "delete questions")
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=question_id, user_id=user_id)
    )


@router.post("/{question_id}/like", response_model=LikeQuestionResponse)
async def like_question(
    question_id: UUID,
    like_question_use_case: FromDishka[LikeQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeQuestionResponse:
    """Toggle the current user's like on a question."""
    user_id = require_user_id(jwt_service, auth_token, "like questions")
    return await like_question_use_case.execute(
        LikeQuestionRequest(question_id=question_id, user_id=user_id)
    )
