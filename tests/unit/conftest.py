import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.fixtures.fake_mailer import RecordingMailer


def _passthrough():
    # Repository create/update hand back the entity they were given
    return AsyncMock(side_effect=lambda entity: entity)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_identifier = AsyncMock(return_value=None)
    uow.users.create = _passthrough()
    uow.users.update = _passthrough()

    uow.tasks = MagicMock()
    uow.tasks.list_by_username = AsyncMock(return_value=[])
    uow.tasks.get = AsyncMock(return_value=None)
    uow.tasks.create = _passthrough()
    uow.tasks.update = _passthrough()
    uow.tasks.delete = AsyncMock()

    uow.trash = MagicMock()
    uow.trash.list_by_username = AsyncMock(return_value=[])
    uow.trash.create = _passthrough()
    uow.trash.delete = AsyncMock()

    uow.counters = MagicMock()
    uow.counters.next_value = AsyncMock(return_value=1)
    return uow


@pytest.fixture
def mailer():
    return RecordingMailer()
