from screamscore.core.scoring import spook_score
from screamscore.models.rating import Rating
from screamscore.schemas.rating import RatingPublic


def to_public(rating: Rating) -> RatingPublic:
    """
    Convert a Rating row to its public schema, adding the rating's own spook score.

    Parameters:
        rating (Rating): The Rating object to convert.
    Returns:
        RatingPublic: The converted schema.
    """
    return RatingPublic(
        **rating.model_dump(),
        spook_score=spook_score(rating),
    )
