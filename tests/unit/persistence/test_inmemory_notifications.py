"""Unit tests for inbox ordering in the in-memory notification repository."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from quorum.domain.value import UserId
from quorum.persistence.repository.inmemory import InMemoryNotificationRepository
from tests.conftest import make_notification


@pytest.mark.asyncio
async def test_same_instant_lists_later_insert_first():
    repo = InMemoryNotificationRepository()
    recipient = UserId(uuid4())
    now = datetime.now()
    first = await repo.save(make_notification(recipient, created_at=now))
    second = await repo.save(make_notification(recipient, created_at=now))

    listed = await repo.find_by_recipient(recipient)

    assert [n.id for n in listed] == [second.id, first.id]


@pytest.mark.asyncio
async def test_newer_notifications_come_first():
    repo = InMemoryNotificationRepository()
    recipient = UserId(uuid4())
    now = datetime.now()
    newer = await repo.save(make_notification(recipient, created_at=now))
    older = await repo.save(
        make_notification(recipient, created_at=now - timedelta(minutes=1))
    )

    listed = await repo.find_by_recipient(recipient)

    assert [n.id for n in listed] == [newer.id, older.id]
