from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import LoadProfileUseCase, ProfileResponse
from src.depends import get_current_username, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/auth/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_me(
    username: str = Depends(get_current_username),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User Profile

    Raises:
        - 401 Unauthorized: Missing or unknown x-user header
    """
    result = await LoadProfileUseCase(uow).execute(username)

    if result.is_err():
        raise_for_error(result.error, set())

    return result.value
