from typing import Any, List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import RestoreTasksResponse, TrashEntryResponse
from src.app.use_cases.trash import ListTrashUseCase, RestoreTrashUseCase
from src.depends import get_current_username, get_unit_of_work

router = APIRouter(prefix="/trash", tags=["Trash"])


class RestoreRequest(BaseModel):
    """ids is validated by the use case so a bad shape is a 400, not a 422"""

    ids: Any = None


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TrashEntryResponse])
async def list_trash(
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Trash

    Entries deleted 2 or more days ago are purged before the list is returned.
    """
    result = await ListTrashUseCase(uow).execute(username)

    if result.is_err():
        raise_for_error(result.error, set())

    return result.value


@router.post("/restore", status_code=status.HTTP_200_OK, response_model=RestoreTasksResponse)
async def restore_trash(
    request: RestoreRequest,
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Restore Tasks

    Raises:
        - 400 Bad Request: ids missing, empty or not a list of integers
    """
    result = await RestoreTrashUseCase(uow).execute(username, request.ids)

    if result.is_err():
        raise_for_error(result.error, {"INVALID_REQUEST"})

    return result.value
