"""Answer use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerUseCase
from .create_answer import CreateAnswerRequest, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerResponse, DeleteAnswerUseCase
from .like_answer import LikeAnswerRequest, LikeAnswerResponse, LikeAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .update_answer import UpdateAnswerRequest, UpdateAnswerUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerUseCase",
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerResponse",
    "DeleteAnswerUseCase",
    "LikeAnswerRequest",
    "LikeAnswerResponse",
    "LikeAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "UpdateAnswerRequest",
    "UpdateAnswerUseCase",
]
