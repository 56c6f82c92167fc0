"""Indices module - trophic diversity indices per community."""

from .errors import (
    DimensionMismatchError,
    InvalidInputError,
    NameMismatchError,
    NoSpeciesPresentError,
    TrophDivError,
)
from .models import INDEX_COLUMNS, CommunityIndices
from .report import CommunityFailure, ComputationReport
from .service import TrophicDiversityService, trophdiv

__all__ = [
    "DimensionMismatchError",
    "InvalidInputError",
    "NameMismatchError",
    "NoSpeciesPresentError",
    "TrophDivError",
    "INDEX_COLUMNS",
    "CommunityIndices",
    "CommunityFailure",
    "ComputationReport",
    "TrophicDiversityService",
    "trophdiv",
]
