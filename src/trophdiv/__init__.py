"""trophdiv - trophic diversity indices for ecological communities."""

from .indices import (
    INDEX_COLUMNS,
    CommunityIndices,
    ComputationReport,
    TrophicDiversityService,
    trophdiv,
)

__all__ = [
    "INDEX_COLUMNS",
    "CommunityIndices",
    "ComputationReport",
    "TrophicDiversityService",
    "trophdiv",
]
