"""Exceptions raised by the index engine and its input collaborators."""

from typing import Any, Optional


class TrophDivError(ValueError):
    """Base class for all trophic diversity errors."""


class DimensionMismatchError(TrophDivError):
    """Number of species differs between abundances and trophic levels."""

    def __init__(self, n_abundance_species: int, n_trophic_levels: int):
        self.n_abundance_species = n_abundance_species
        self.n_trophic_levels = n_trophic_levels
        super().__init__(
            f"Number of species differs: abundance table has {n_abundance_species} "
            f"columns, trophic levels has {n_trophic_levels} values"
        )


class InvalidInputError(TrophDivError):
    """Input values violate a domain rule (missing levels, negative abundances...)."""


class NameMismatchError(TrophDivError):
    """Species labels or their order differ between the two inputs."""

    def __init__(self, position: int, abundance_label: Any, trophic_label: Any):
        self.position = position
        self.abundance_label = abundance_label
        self.trophic_label = trophic_label
        super().__init__(
            f"Species names differ at position {position}: "
            f"abundance column '{abundance_label}' vs trophic level '{trophic_label}'"
        )


class NoSpeciesPresentError(TrophDivError):
    """A community has no species with positive abundance."""

    def __init__(self, community: Any, message: Optional[str] = None):
        self.community = community
        super().__init__(
            message
            or f"Community '{community}' has no species with positive abundance"
        )
