from typing import List
import pandas as pd
from .predicates import PresencePredicate


class PresenceFilter:
    """
    Compose presence predicates over one community's abundance row.
    A species is present when every predicate holds (AND logic).
    """

    def __init__(self, predicates: List[PresencePredicate] = None):
        self.predicates = predicates or []

    def add(self, predicate: PresencePredicate) -> "PresenceFilter":
        """Add a predicate. Returns self for chaining."""
        self.predicates.append(predicate)
        return self

    def mask(self, row: pd.Series) -> pd.Series:
        """Boolean mask of present species, aligned with the row."""
        mask = pd.Series(True, index=row.index)
        for predicate in self.predicates:
            mask &= predicate(row)
        return mask

    def apply(self, row: pd.Series) -> pd.Series:
        """Abundances of present species only (the row restricted to ``mask``)."""
        return row[self.mask(row)]

    def summary(self, row: pd.Series) -> dict:
        """
        Count how many species each predicate removes, in order.
        Logged by the engine at DEBUG level.
        """
        kept = pd.Series(True, index=row.index)
        steps = []
        for predicate in self.predicates:
            before = int(kept.sum())
            kept &= predicate(row)
            steps.append({
                "predicate": predicate.__qualname__.split(".")[0],
                "present": int(kept.sum()),
                "dropped": before - int(kept.sum()),
            })

        return {
            "species": len(row),
            "present": int(kept.sum()),
            "steps": steps,
        }
