from typing import Optional

from fastapi import Depends, Header, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.smtp_mailer import SmtpMailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import AuthenticateUserUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work(request: Request):
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, lock=request.app.state.write_lock)


def get_mailer() -> IMailer:
    return SmtpMailer.from_config(ApplicationConfig)


async def get_current_username(
    x_user: Optional[str] = Header(default=None),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> str:
    """
    Session gate: the x-user header must name an existing user.

    Raises:
        ClientError: 401 if the header is missing or names no user
    """
    result = await AuthenticateUserUseCase(uow).execute(x_user)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
