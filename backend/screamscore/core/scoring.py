"""Derived rating values. Nothing here is persisted; callers recompute on every read."""

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel

__all__ = [
    "SubScores",
    "RatingAverages",
    "rounded_mean",
    "calculate_averages",
    "spook_score",
]


class SubScores(Protocol):
    scream: int
    psychological: int
    suspense: int


class RatingAverages(BaseModel):
    scream: int = 0
    psychological: int = 0
    suspense: int = 0
    spook_score: int = 0
    rating_count: int = 0


def rounded_mean(total: int, count: int) -> int:
    # total / count rounded half up, without float error
    return (2 * total + count) // (2 * count)


def spook_score(rating: SubScores) -> int:
    """Composite score of a single rating."""
    return rounded_mean(rating.scream + rating.psychological + rating.suspense, 3)


def calculate_averages(ratings: Sequence[SubScores]) -> RatingAverages:
    """
    Average every axis over a rating set and derive the spook score.

    The spook score is the mean of the three unrounded axis means, which is
    the grand total over three times the count. Everything is computed on
    integer totals so exact halves always round up.

    Parameters:
        ratings (Sequence[SubScores]): The ratings of a single movie.
    Returns:
        RatingAverages: Rounded averages. All zero for an empty set.
    """
    count = len(ratings)
    if count == 0:
        return RatingAverages()

    scream = sum(r.scream for r in ratings)
    psychological = sum(r.psychological for r in ratings)
    suspense = sum(r.suspense for r in ratings)

    return RatingAverages(
        scream=rounded_mean(scream, count),
        psychological=rounded_mean(psychological, count),
        suspense=rounded_mean(suspense, count),
        spook_score=rounded_mean(scream + psychological + suspense, 3 * count),
        rating_count=count,
    )
