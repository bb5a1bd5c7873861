from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class RatingSubmission(BaseModel):
    """
    Body of a rating request. Every field is optional here so that missing
    values surface as the service's own 400 messages rather than schema errors.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    movie_id: int | None = None
    scream: int | None = None
    psychological: int | None = None
    suspense: int | None = None
    review: str | None = None
    author: str | None = None

    @field_validator("movie_id", "scream", "psychological", "suspense", mode="before")
    @classmethod
    def empty_strings_are_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
