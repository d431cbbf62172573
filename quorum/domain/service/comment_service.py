"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from quorum.domain.error import NotFoundError
from quorum.domain.model import Comment
from quorum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from quorum.domain.value import CommentId, QuestionId, TargetKind, TargetRef, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            question_repository: Question repository (target lookup)
            answer_repository: Answer repository (target lookup)
        """
        self.comment_repository = comment_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def resolve_target(self, target: TargetRef) -> tuple[QuestionId, UserId]:
        """Find the thread and the owner of a comment target.

        Args:
            target: A question or an answer

        Returns:
            The question whose thread the target is in, and the target's author

        Raises:
            NotFoundError: If the target does not exist
        """
        if target.kind == TargetKind.QUESTION:
            question = await self.question_repository.find_by_id(target.id)
            if question is None:
                raise NotFoundError("Question", str(target.id))
            return question.id, question.author_id

        answer = await self.answer_repository.find_by_id(target.id)
        if answer is None:
            raise NotFoundError("Answer", str(target.id))
        return answer.question_id, answer.author_id

    async def create_comment(
        self, target: TargetRef, author_id: UserId, body: str
    ) -> Comment:
        """Comment on a question or an answer.

        Args:
            target: The question or answer commented on
            author_id: The commenting user
            body: Comment text (2-500 characters)

        Returns:
            The created comment

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            target=str(target),
            author_id=str(author_id),
        ):
            question_id, _ = await self.resolve_target(target)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                target=target,
                question_id=question_id,
                author_id=author_id,
                body=body,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), target=str(target)
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_comments(self, target: TargetRef) -> list[Comment]:
        """List comments on a question or answer, oldest first."""
        with logfire.span("comment_service.list_comments", target=str(target)):
            return await self.comment_repository.find_by_target(target)

    async def update_comment(
        self, comment_id: CommentId, requester_id: UserId, body: str
    ) -> Comment:
        """Edit a comment.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment(comment_id)
            self.ensure_author(comment, requester_id, "edit", "comment")

            updated = comment.revised(body=body, updated_at=datetime.now())
            return await self.comment_repository.save(updated)

    async def delete_comment(self, comment_id: CommentId, requester_id: UserId) -> None:
        """Delete a comment.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment(comment_id)
            self.ensure_author(comment, requester_id, "delete", "comment")
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))
