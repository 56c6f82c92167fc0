"""TrophicDiversityService - computes trophic diversity indices per community."""

import logging
import math
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
from tqdm import tqdm

from trophdiv.config import ACTIVE_CONFIG, TrophDivConfig
from trophdiv.filters import DEFAULT_PRESENCE_FILTER
from .errors import NoSpeciesPresentError
from .metrics import (
    fd_var,
    fr_om,
    relative_abundances,
    trophic_richness,
    weighted_mean_tl,
    weighted_sd_tl,
)
from .models import INDEX_COLUMNS, INTEGER_COLUMNS, CommunityIndices
from .report import ComputationReport
from .validation import validate_inputs

logger = logging.getLogger(__name__)

AbundanceInput = Union[pd.DataFrame, np.ndarray]
TrophicInput = Union[pd.Series, np.ndarray, Sequence[float]]


class TrophicDiversityService:
    """
    Compute trophic diversity indices (Villeger et al. 2008) for communities.

    For each community (row of the abundance table) this service:
    1. Keeps species with positive, non-missing abundance
    2. Derives richness indices (abtot, nbsp, nbtl, mintl, maxtl, rgetl)
    3. Derives abundance-weighted indices (meantl, sdtl, FDvar)
    4. Derives evenness (FROm) when at least 3 trophic levels are present

    Communities without any present species get an all-missing row and are
    reported as failures; the other communities are unaffected.
    """

    def __init__(self, config: TrophDivConfig = ACTIVE_CONFIG):
        self.config = config
        self.presence_filter = DEFAULT_PRESENCE_FILTER

    def compute(self, ab: AbundanceInput, tl: TrophicInput) -> pd.DataFrame:
        """
        Compute the ten indices for every community.

        Args:
            ab: Abundance table (communities x species); NaN means absent
            tl: Trophic level per species, labeled like the columns of ``ab``

        Returns:
            DataFrame indexed like ``ab`` with columns INDEX_COLUMNS

        Raises:
            DimensionMismatchError, InvalidInputError, NameMismatchError
        """
        results, _ = self.compute_with_report(ab, tl)
        return results

    def compute_with_report(
        self,
        ab: AbundanceInput,
        tl: TrophicInput,
    ) -> Tuple[pd.DataFrame, ComputationReport]:
        """Same as ``compute`` but also returns the run report."""
        ab, tl = self._coerce_inputs(ab, tl)
        validate_inputs(ab, tl)

        logger.info(
            f"Computing trophic diversity for {ab.shape[0]} communities "
            f"and {ab.shape[1]} species"
        )

        report = ComputationReport()
        records: List[Optional[CommunityIndices]] = []

        iterator = tqdm(
            ab.iterrows(),
            total=ab.shape[0],
            desc=self.config.progress_desc,
            disable=not self.config.show_progress,
        )
        for position, (community, row) in enumerate(iterator):
            report.add_attempt(community)
            try:
                indices = self.compute_community(community, row, tl)
            except NoSpeciesPresentError as e:
                logger.warning(str(e))
                report.add_failure(position, community, str(e))
                records.append(None)
                continue
            report.add_success(community, evenness_defined=indices.FROm is not None)
            records.append(indices)

        logger.info(
            f"Computed {report.success_count}/{len(report.attempted)} communities "
            f"({report.failure_count} without species, "
            f"{len(report.evenness_skipped)} without FROm)"
        )
        return self._build_table(ab.index, records), report

    def compute_community(
        self,
        community: Any,
        row: pd.Series,
        tl: pd.Series,
    ) -> CommunityIndices:
        """
        Compute the indices of one community.

        Raises:
            NoSpeciesPresentError: If no species has positive abundance
        """
        mask = self.presence_filter.mask(row).to_numpy(dtype=bool)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Presence filter for '{community}': {self.presence_filter.summary(row)}"
            )
        if not mask.any():
            raise NoSpeciesPresentError(community)

        abundances = row.to_numpy(dtype=float)[mask]
        levels = tl.to_numpy(dtype=float)[mask]

        # Canonical order: trophic level, then abundance
        order = np.lexsort((abundances, levels))
        abundances = abundances[order]
        levels = levels[order]

        rel_ab = relative_abundances(abundances)
        mintl = float(levels.min())
        maxtl = float(levels.max())
        meantl = weighted_mean_tl(levels, rel_ab)
        from_value = fr_om(levels, abundances)

        return CommunityIndices(
            community=community,
            abtot=float(abundances.sum()),
            nbsp=int(abundances.size),
            nbtl=trophic_richness(levels),
            mintl=mintl,
            maxtl=maxtl,
            rgetl=maxtl - mintl,
            meantl=meantl,
            sdtl=weighted_sd_tl(levels, rel_ab, meantl),
            FDvar=fd_var(levels, rel_ab),
            FROm=None if math.isnan(from_value) else from_value,
        )

    def _coerce_inputs(
        self,
        ab: AbundanceInput,
        tl: TrophicInput,
    ) -> Tuple[pd.DataFrame, pd.Series]:
        """Wrap bare arrays; unlabeled trophic levels pair with columns by position."""
        if not isinstance(ab, pd.DataFrame):
            ab = pd.DataFrame(np.asarray(ab, dtype=float))
        if not isinstance(tl, pd.Series):
            values = np.asarray(tl, dtype=float)
            index = ab.columns if values.size == ab.shape[1] else None
            tl = pd.Series(values, index=index)
        return ab, tl

    def _build_table(
        self,
        index: pd.Index,
        records: List[Optional[CommunityIndices]],
    ) -> pd.DataFrame:
        """Assemble one row per community, in input order."""
        rows = [
            r.to_row() if r is not None else dict.fromkeys(INDEX_COLUMNS)
            for r in records
        ]
        table = pd.DataFrame(rows, columns=INDEX_COLUMNS, index=index)
        for col in INDEX_COLUMNS:
            dtype = "Int64" if col in INTEGER_COLUMNS else "float64"
            table[col] = table[col].astype(dtype)
        return table


def trophdiv(ab: AbundanceInput, tl: TrophicInput) -> pd.DataFrame:
    """Compute trophic diversity indices with the active configuration."""
    return TrophicDiversityService().compute(ab, tl)
