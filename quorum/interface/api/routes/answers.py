"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from quorum.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    LikeAnswerRequest,
    LikeAnswerResponse,
    LikeAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from quorum.application.usecase.views import AnswerView
from quorum.domain.repository import AnswerSortOrder
from quorum.domain.service import JWTService
from quorum.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class AnswerBodyAPIRequest(BaseModel):
    """API request carrying an answer body."""

    body: str = Field(min_length=1)


@router.get("/questions/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    sort: AnswerSortOrder = Query(default=AnswerSortOrder.VOTES),
    auth_token: str | None = Cookie(default=None),
) -> ListAnswersResponse:
    """List the answers to a question."""
    return await list_answers_use_case.execute(
        ListAnswersRequest(
            question_id=question_id,
            sort=sort,
            user_id=optional_user_id(jwt_service, auth_token),
        )
    )


@router.post(
    "/questions/{question_id}/answers",
    response_model=AnswerView,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: AnswerBodyAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Answer a question.

    Requires authentication. Each user may answer a question once.

    Args:
        question_id: Question UUID
        request: Answer content
        create_answer_use_case: Create answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The created answer
    """
    user_id = require_user_id(jwt_service, auth_token, "answer questions")
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=question_id, author_id=user_id, body=request.body
        )
    )


@router.patch("/answers/{answer_id}", response_model=AnswerView)
async def update_answer(
    answer_id: UUID,
    request: AnswerBodyAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Edit an answer. Author only."""
    user_id = require_user_id(jwt_service, auth_token, "edit answers")
    return await update_answer_use_case.execute(
        UpdateAnswerRequest(answer_id=answer_id, user_id=user_id, body=request.body)
    )


@router.delete("/answers/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer. Author only."""
    user_id = require_user_id(jwt_service, auth_token, "delete answers")
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=answer_id, user_id=user_id)
    )


@router.put("/answers/{answer_id}/accept", response_model=AnswerView)
async def accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerView:
    """Accept an answer as the solution to its question.

    Only the question author may accept. Any previously accepted answer
    loses its acceptance.
    """
    user_id = require_user_id(jwt_service, auth_token, "accept answers")
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(answer_id=answer_id, user_id=user_id)
    )


@router.post("/answers/{answer_id}/like", response_model=LikeAnswerResponse)
async def like_answer(
    answer_id: UUID,
    like_answer_use_case: FromDishka[LikeAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeAnswerResponse:
    """Toggle the current user's like on an answer."""
    user_id = require_user_id(jwt_service, auth_token, "like answers")
    return await like_answer_use_case.execute(
        LikeAnswerRequest(answer_id=answer_id, user_id=user_id)
    )
