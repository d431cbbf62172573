"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from quorum.domain.model import Answer, Comment, Notification, Question, User, Votable
from quorum.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    TargetKind,
    TargetRef,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def _user_ids(values: Optional[Iterable[Any]]) -> frozenset[UserId]:
    return frozenset(UserId(_uuid(v)) for v in values or ())


def _reaction_fields(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "upvoters": _user_ids(row.get("upvoters")),
        "downvoters": _user_ids(row.get("downvoters")),
        "likers": _user_ids(row.get("likers")),
        "version": row.get("version", 0),
    }


def reactions_to_dict(entity: Votable) -> Dict[str, Any]:
    """Convert the reaction state of a votable to column values.

    Args:
        entity: Question or answer

    Returns:
        Dict of voter arrays, derived counts and version
    """
    return {
        "upvoters": sorted(entity.upvoters),
        "downvoters": sorted(entity.downvoters),
        "likers": sorted(entity.likers),
        "vote_count": entity.vote_count,
        "like_count": entity.like_count,
        "version": entity.version,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        reputation=row["reputation"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "reputation": user.reputation,
        "created_at": user.created_at,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    accepted = _optional_uuid(row.get("accepted_answer_id"))
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        tags=tuple(row.get("tags") or ()),
        author_id=UserId(_uuid(row["author_id"])),
        views=row["views"],
        answer_count=row["answer_count"],
        accepted_answer_id=AnswerId(accepted) if accepted else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        **_reaction_fields(row),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": question.id,
        "title": question.title,
        "body": question.body,
        "tags": list(question.tags),
        "author_id": question.author_id,
        "views": question.views,
        "answer_count": question.answer_count,
        "accepted_answer_id": question.accepted_answer_id,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
        **reactions_to_dict(question),
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    accepted_by = _optional_uuid(row.get("accepted_by"))
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        is_accepted=row["is_accepted"],
        accepted_at=row.get("accepted_at"),
        accepted_by=UserId(accepted_by) if accepted_by else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        **_reaction_fields(row),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "author_id": answer.author_id,
        "body": answer.body,
        "is_accepted": answer.is_accepted,
        "accepted_at": answer.accepted_at,
        "accepted_by": answer.accepted_by,
        "created_at": answer.created_at,
        "updated_at": answer.updated_at,
        **reactions_to_dict(answer),
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        target=TargetRef(
            kind=TargetKind(row["target_kind"]), id=_uuid(row["target_id"])
        ),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "target_kind": comment.target.kind.value,
        "target_id": comment.target.id,
        "question_id": comment.question_id,
        "author_id": comment.author_id,
        "body": comment.body,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    question_id = _optional_uuid(row.get("question_id"))
    answer_id = _optional_uuid(row.get("answer_id"))
    comment_id = _optional_uuid(row.get("comment_id"))
    actor_id = _optional_uuid(row.get("actor_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        question_id=QuestionId(question_id) if question_id else None,
        answer_id=AnswerId(answer_id) if answer_id else None,
        comment_id=CommentId(comment_id) if comment_id else None,
        actor_id=UserId(actor_id) if actor_id else None,
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "recipient_id": notification.recipient_id,
        "type": notification.type.value,
        "title": notification.title,
        "message": notification.message,
        "question_id": notification.question_id,
        "answer_id": notification.answer_id,
        "comment_id": notification.comment_id,
        "actor_id": notification.actor_id,
        "is_read": notification.is_read,
        "read_at": notification.read_at,
        "created_at": notification.created_at,
    }
