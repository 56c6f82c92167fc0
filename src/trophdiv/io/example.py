"""Random demonstration data, shaped like a real survey."""

from typing import Optional, Tuple

import numpy as np
import pandas as pd

# Share of cells filled with a random abundance; the rest are zeros plus one NaN
OCCUPIED_SHARE = 15 / 24


def generate_example(
    n_communities: int = 4,
    n_species: int = 6,
    seed: Optional[int] = None,
) -> Tuple[pd.DataFrame, pd.Series]:
    """
    Build an example abundance table and trophic level vector.

    With the defaults (4 x 6) the table holds 15 random abundances in
    [0, 100], 8 zeros and one missing value, shuffled. Trophic levels are
    drawn uniformly in [2, 4.5] and rounded to one decimal.

    Returns:
        (abundances, trophic_levels) labeled com1..comC and sp1..spS
    """
    rng = np.random.default_rng(seed)
    n_cells = n_communities * n_species

    n_occupied = min(n_cells, int(round(n_cells * OCCUPIED_SHARE)))
    n_missing = 1 if n_cells > n_occupied else 0
    n_zeros = n_cells - n_occupied - n_missing

    pool = np.concatenate([
        np.round(rng.uniform(0, 100, n_occupied)),
        np.zeros(n_zeros),
        np.full(n_missing, np.nan),
    ])
    rng.shuffle(pool)

    species = [f"sp{j}" for j in range(1, n_species + 1)]
    ab = pd.DataFrame(
        pool.reshape(n_communities, n_species),
        index=[f"com{i}" for i in range(1, n_communities + 1)],
        columns=species,
    )
    tl = pd.Series(np.round(rng.uniform(2, 4.5, n_species), 1), index=species)
    return ab, tl
