"""Result models — engine output contracts."""

from forklift_calc.models.results import (
    GradeResult,
    LoadResult,
    Message,
    Recommendation,
    TcoResult,
)

__all__ = [
    "GradeResult",
    "LoadResult",
    "Message",
    "Recommendation",
    "TcoResult",
]
