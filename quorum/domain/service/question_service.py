"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from quorum.domain.error import NotFoundError
from quorum.domain.model import Question
from quorum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    QuestionSortOrder,
)
from quorum.domain.value import QuestionId, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (cascade deletion)
            comment_repository: Comment repository (cascade deletion)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository

    async def create_question(
        self, author_id: UserId, title: str, body: str, tags: list[str]
    ) -> Question:
        """Create a question.

        Args:
            author_id: The asking user
            title: Question title
            body: Question body
            tags: Tags, stored as given

        Returns:
            The created question
        """
        with logfire.span("question_service.create_question", author_id=str(author_id)):
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                body=body,
                tags=tuple(tags),
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_repository.find_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", str(question_id))
        return question

    async def view_question(self, question_id: QuestionId) -> Question:
        """Record a detail view and return the question.

        Every call counts; views are not deduplicated per user.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.view_question", question_id=str(question_id)):
            question = await self.question_repository.increment_views(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List questions.

        Returns:
            The page of questions and the total matching count
        """
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            search=search,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                sort=sort, search=search, limit=limit, offset=offset
            )
            total = await self.question_repository.count(search=search)
            return questions, total

    async def update_question(
        self,
        question_id: QuestionId,
        requester_id: UserId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Question:
        """Edit a question's content.

        Raises:
            NotFoundError: If the question does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            requester_id=str(requester_id),
        ):
            question = await self.get_question(question_id)
            self.ensure_author(question, requester_id, "edit", "question")

            updates: dict = {"updated_at": datetime.now()}
            if title is not None:
                updates["title"] = title
            if body is not None:
                updates["body"] = body
            if tags is not None:
                updates["tags"] = tuple(tags)

            updated = question.revised(**updates)
            saved = await self.question_repository.save(updated)
            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def delete_question(
        self, question_id: QuestionId, requester_id: UserId
    ) -> None:
        """Delete a question with its answers and thread comments.

        Raises:
            NotFoundError: If the question does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            requester_id=str(requester_id),
        ):
            question = await self.get_question(question_id)
            self.ensure_author(question, requester_id, "delete", "question")

            comments = await self.comment_repository.delete_by_question(question_id)
            answers = await self.answer_repository.delete_by_question(question_id)
            await self.question_repository.delete(question_id)
            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answers_deleted=answers,
                comments_deleted=comments,
            )
