from logging import getLogger

from sqlmodel import Session, create_engine

from screamscore import crud
from screamscore.core.config import settings

logger = getLogger(__name__)

engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, pool_pre_ping=True)


# make sure all SQLModel models are imported (screamscore.models) before initializing DB
# otherwise, SQLModel might fail to initialize relationships properly
# Tables are created with Alembic migrations, see screamscore/alembic


def init_db(session: Session) -> None:
    """
    Check that the migrated schema is reachable and report the catalog size.

    Parameters:
        session (Session): The database session.
    """
    count = crud.count_movies(session=session)
    logger.info("Database ready, %s movies in catalog", count)
