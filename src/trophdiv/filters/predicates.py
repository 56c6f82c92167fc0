from typing import Callable
import pandas as pd

# Type alias for presence predicates: abundance row -> boolean mask
PresencePredicate = Callable[[pd.Series], pd.Series]


def not_missing() -> PresencePredicate:
    """Keep species whose abundance is recorded (not NaN)."""
    def predicate(row: pd.Series) -> pd.Series:
        return row.notna()
    return predicate


def positive_abundance() -> PresencePredicate:
    """Keep species with strictly positive abundance. NaN compares False."""
    def predicate(row: pd.Series) -> pd.Series:
        return row > 0
    return predicate
