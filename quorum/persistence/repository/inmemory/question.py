"""In-memory question repository for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from quorum.domain.model.question import Question
from quorum.domain.repository.question import QuestionRepository, QuestionSortOrder
from quorum.domain.value import AnswerId, QuestionId

from .store import InMemoryStore

_SORT_KEYS = {
    QuestionSortOrder.RECENT: lambda q: q.created_at,
    QuestionSortOrder.VOTES: lambda q: (q.vote_count, q.created_at),
    QuestionSortOrder.VIEWS: lambda q: (q.views, q.created_at),
    QuestionSortOrder.LIKES: lambda q: (q.like_count, q.created_at),
}


def _matches(question: Question, search: Optional[str]) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in question.title.lower() or needle in question.body.lower()


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        store = store or InMemoryStore()
        self._questions = store.questions
        self._locks = store.question_locks

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        questions = [q for q in self._questions.values() if _matches(q, search)]
        questions.sort(key=_SORT_KEYS[sort], reverse=True)
        return questions[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count questions matching the search."""
        return sum(1 for q in self._questions.values() if _matches(q, search))

    async def save(self, question: Question) -> Question:
        """Insert a question or update its editable content."""
        existing = self._questions.get(question.id)
        if existing is not None:
            question = existing.model_copy(
                update={
                    "title": question.title,
                    "body": question.body,
                    "tags": question.tags,
                    "updated_at": question.updated_at,
                }
            )
        self._questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        question = question.model_copy(update={"views": question.views + 1})
        self._questions[question_id] = question
        return question

    async def compare_and_set(self, question: Question, expected_version: int) -> bool:
        """Write reaction state if the stored version still matches."""
        stored = self._questions.get(question.id)
        if stored is None or stored.version != expected_version:
            return False
        self._questions[question.id] = stored.model_copy(
            update={
                "upvoters": question.upvoters,
                "downvoters": question.downvoters,
                "likers": question.likers,
                "version": question.version,
            }
        )
        return True

    @asynccontextmanager
    async def acceptance_lock(
        self, question_id: QuestionId
    ) -> AsyncIterator[Optional[Question]]:
        """Hold the per-question lock for the duration of the block."""
        async with self._locks[question_id]:
            yield self._questions.get(question_id)

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Point the question at its accepted answer (or clear it)."""
        question = self._questions.get(question_id)
        if question is not None:
            self._questions[question_id] = question.model_copy(
                update={"accepted_answer_id": answer_id}
            )

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Adjust the answer count, floored at zero."""
        question = self._questions.get(question_id)
        if question is not None:
            self._questions[question_id] = question.model_copy(
                update={"answer_count": max(question.answer_count + delta, 0)}
            )
