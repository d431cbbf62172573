"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from quorum.application.usecase.reaction import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from quorum.domain.service import JWTService
from quorum.domain.value import TargetKind
from quorum.interface.api.auth import require_user_id

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting.

    vote_type is validated by the reaction ledger so unknown values
    surface as a 400 with the offending value.
    """

    vote_type: str


async def _cast_vote(
    target_kind: TargetKind,
    target_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> CastVoteResponse:
    user_id = require_user_id(jwt_service, auth_token, "vote")
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            target_kind=target_kind,
            target_id=target_id,
            user_id=user_id,
            vote_type=request.vote_type,
        )
    )


@router.post("/question/{question_id}", response_model=CastVoteResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question.

    Voting the same way again removes the vote; voting the other way
    switches it.

    Args:
        question_id: Question UUID
        request: upvote or downvote
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        New vote count and the user's vote state
    """
    return await _cast_vote(
        TargetKind.QUESTION,
        question_id,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )


@router.post("/answer/{answer_id}", response_model=CastVoteResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an answer. Same toggle rules as questions."""
    return await _cast_vote(
        TargetKind.ANSWER,
        answer_id,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )
