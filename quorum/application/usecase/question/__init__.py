"""Question use cases."""

from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .like_question import LikeQuestionRequest, LikeQuestionResponse, LikeQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "LikeQuestionRequest",
    "LikeQuestionResponse",
    "LikeQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
]
