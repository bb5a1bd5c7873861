from typing import Annotated

from fastapi import APIRouter, Depends

from screamscore.api.deps import SessionDep
from screamscore.inputs.movie import HomeFilters, get_home_filters
from screamscore.schemas.movie import HomeSections
from screamscore.services import home as home_service

router = APIRouter(prefix="/home", tags=["home"])


@router.get("/", response_model=HomeSections)
def read_home_sections(
    session: SessionDep,
    filters: Annotated[HomeFilters, Depends(get_home_filters)],
) -> HomeSections:
    return home_service.get_home_sections(session=session, filters=filters)
