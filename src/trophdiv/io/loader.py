"""Load abundance tables and trophic levels from CSV files."""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from trophdiv.indices.errors import InvalidInputError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_abundance_table(path: PathLike) -> pd.DataFrame:
    """
    Load a communities x species abundance table.

    The first column holds community labels, the header holds species labels.
    Empty cells are read as missing (species not recorded).
    """
    df = pd.read_csv(path, index_col=0)
    try:
        df = df.apply(pd.to_numeric).astype(float)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"Non-numeric abundance in {path}: {e}") from e

    df.columns = [str(c) for c in df.columns]
    logger.info(f"Loaded {df.shape[0]} communities x {df.shape[1]} species from {path}")
    return df


def load_trophic_levels(path: PathLike) -> pd.Series:
    """
    Load trophic levels from a two-column CSV (species, trophic level).
    """
    df = pd.read_csv(path)
    if df.shape[1] != 2:
        raise InvalidInputError(
            f"Expected 2 columns (species, trophic level) in {path}, got {df.shape[1]}"
        )

    species_col, level_col = df.columns
    try:
        levels = pd.to_numeric(df[level_col]).astype(float)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"Non-numeric trophic level in {path}: {e}") from e

    levels.index = pd.Index([str(s) for s in df[species_col]])
    levels.name = str(level_col)
    logger.info(f"Loaded trophic levels for {len(levels)} species from {path}")
    return levels
