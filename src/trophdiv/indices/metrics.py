"""
Per-community trophic diversity metrics.

All functions take 1-D numpy arrays restricted to the species present in a
community (strictly positive abundances), in matching order.
"""

import logging
import math
import numpy as np

logger = logging.getLogger(__name__)

ROUND_DECIMALS = 3

# FROm requires at least this many distinct trophic levels
MIN_LEVELS_FOR_EVENNESS = 3


def _round(value: float) -> float:
    return round(float(value), ROUND_DECIMALS)


def trophic_richness(levels: np.ndarray) -> int:
    """Number of distinct trophic levels."""
    return int(np.unique(levels).size)


def relative_abundances(abundances: np.ndarray) -> np.ndarray:
    """Abundances scaled to sum to 1."""
    return abundances / abundances.sum()


def weighted_mean_tl(levels: np.ndarray, rel_ab: np.ndarray) -> float:
    """Abundance-weighted mean trophic level (MTI), rounded to 3 decimals."""
    return _round(np.dot(levels, rel_ab))


def weighted_sd_tl(levels: np.ndarray, rel_ab: np.ndarray, meantl: float) -> float:
    """
    Abundance-weighted standard deviation of trophic levels.

    Uses the already rounded ``meantl``; a negative radicand left by that
    rounding is clamped to zero before the square root.
    """
    radicand = float(np.dot(levels ** 2, rel_ab)) - meantl ** 2
    if radicand < 0:
        logger.debug(f"Clamping negative sdtl radicand {radicand!r} to 0")
        radicand = 0.0
    return _round(math.sqrt(radicand))


def fd_var(levels: np.ndarray, rel_ab: np.ndarray) -> float:
    """
    FDvar (Mason et al. 2003): weighted variance of log trophic levels,
    mapped to [0, 1) with 2/pi * atan(5 * V).
    """
    log_tl = np.log(levels)
    variance = float(np.dot(log_tl ** 2, rel_ab)) - float(np.dot(log_tl, rel_ab)) ** 2
    return _round(2 / math.pi * math.atan(5 * variance))


def fr_om(levels: np.ndarray, abundances: np.ndarray) -> float:
    """
    FROm, trophic evenness modified from Mouillot et al. (2005).

    Only defined with at least 3 distinct trophic levels; returns NaN otherwise.
    """
    if trophic_richness(levels) < MIN_LEVELS_FOR_EVENNESS:
        return float("nan")

    order = np.argsort(levels, kind="stable")
    to = levels[order]
    bo = abundances[order] / abundances.sum()
    s = bo.size
    os_ = 1.0 / (s - 1)

    ew = np.abs(to[1:] - to[:-1]) / (bo[1:] + bo[:-1])
    pew = ew / ew.sum()
    min_pew = np.minimum(pew, os_)
    return _round((min_pew.sum() - os_) / (1 - os_))
