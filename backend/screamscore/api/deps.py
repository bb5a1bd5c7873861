from collections.abc import Generator
from contextlib import contextmanager
from typing import Annotated

from fastapi import Depends, Header
from sqlmodel import Session

from screamscore.core.config import settings
from screamscore.core.db import engine
from screamscore.exceptions.base import AdminRequiredError


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]


def require_admin(
    x_admin_token: Annotated[str | None, Header()] = None,
) -> None:
    if not settings.ADMIN_TOKEN or x_admin_token != settings.ADMIN_TOKEN:
        raise AdminRequiredError


AdminDep = Depends(require_admin)
