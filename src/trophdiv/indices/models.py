"""Pydantic models for the indices module."""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


# Output column order of the result table
INDEX_COLUMNS: List[str] = [
    "abtot",
    "nbsp",
    "nbtl",
    "mintl",
    "maxtl",
    "rgetl",
    "meantl",
    "sdtl",
    "FDvar",
    "FROm",
]

# Count columns use pandas' nullable integer dtype
INTEGER_COLUMNS: List[str] = ["nbsp", "nbtl"]


class CommunityIndices(BaseModel):
    """Trophic diversity indices of a single community."""

    community: Any

    abtot: float = Field(description="Total abundance of present species")
    nbsp: int = Field(description="Number of present species")
    nbtl: int = Field(description="Number of distinct trophic levels (trophic richness)")
    mintl: float
    maxtl: float
    rgetl: float = Field(description="Range of trophic levels (trophic richness)")
    meantl: float = Field(description="Abundance-weighted mean trophic level (MTI)")
    sdtl: float = Field(description="Abundance-weighted standard deviation of trophic levels")
    FDvar: float = Field(description="Trophic divergence, in [0, 1)")
    FROm: Optional[float] = Field(
        default=None,
        description="Trophic evenness, in [0, 1]; undefined below 3 trophic levels",
    )

    def to_row(self) -> Dict[str, Any]:
        """Index values keyed by result column, without the community label."""
        return {col: getattr(self, col) for col in INDEX_COLUMNS}
