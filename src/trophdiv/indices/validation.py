"""Structural checks on the abundance table and trophic levels."""

import logging
import numpy as np
import pandas as pd

from .errors import DimensionMismatchError, InvalidInputError, NameMismatchError

logger = logging.getLogger(__name__)


def validate_inputs(ab: pd.DataFrame, tl: pd.Series) -> None:
    """
    Validate inputs once, before any per-community work.

    Checks run in order and the first failure is raised:
    1. species count (DimensionMismatchError)
    2. no missing trophic levels (InvalidInputError)
    3. species labels and order (NameMismatchError)
    4. trophic levels finite and > 0 (InvalidInputError)
    5. no negative abundances (InvalidInputError)
    6. no infinite abundances; NaN still means absent (InvalidInputError)
    """
    n_species = ab.shape[1]
    if len(tl) != n_species:
        raise DimensionMismatchError(n_species, len(tl))

    if tl.isna().any():
        missing = [str(s) for s in tl.index[tl.isna()]]
        raise InvalidInputError(
            f"Missing values are not allowed in trophic levels (species: {', '.join(missing)})"
        )

    for position, (ab_label, tl_label) in enumerate(zip(ab.columns, tl.index)):
        if ab_label != tl_label:
            raise NameMismatchError(position, ab_label, tl_label)

    values = tl.to_numpy(dtype=float)
    bad = ~np.isfinite(values) | (values <= 0)
    if bad.any():
        offenders = [str(s) for s in tl.index[bad]]
        raise InvalidInputError(
            f"Trophic levels must be finite and > 0 (species: {', '.join(offenders)})"
        )

    negative = ab < 0
    if negative.to_numpy().any():
        row_pos, col_pos = np.argwhere(negative.to_numpy())[0]
        raise InvalidInputError(
            f"Negative abundance {ab.iat[row_pos, col_pos]} for species "
            f"'{ab.columns[col_pos]}' in community '{ab.index[row_pos]}'"
        )

    abundances = ab.to_numpy(dtype=float)
    infinite = np.isinf(abundances)
    if infinite.any():
        row_pos, col_pos = np.argwhere(infinite)[0]
        raise InvalidInputError(
            f"Non-finite abundance {abundances[row_pos, col_pos]} for species "
            f"'{ab.columns[col_pos]}' in community '{ab.index[row_pos]}'"
        )

    logger.debug(f"Validated {ab.shape[0]} communities x {n_species} species")
