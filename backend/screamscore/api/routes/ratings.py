from fastapi import APIRouter, status

from screamscore.api.deps import SessionDep
from screamscore.inputs.rating import RatingSubmission
from screamscore.schemas.rating import RatingPublic
from screamscore.services import ratings as ratings_service

router = APIRouter(prefix="/ratings", tags=["ratings"])


@router.post("/", response_model=RatingPublic, status_code=status.HTTP_201_CREATED)
def create_rating(
    *,
    session: SessionDep,
    submission: RatingSubmission,
) -> RatingPublic:
    return ratings_service.add_rating(session=session, submission=submission)
