"""Presence filters - select the species present in a community."""

from .predicates import PresencePredicate, not_missing, positive_abundance
from .composer import PresenceFilter
from .config import DEFAULT_PRESENCE_FILTER

__all__ = [
    "PresencePredicate",
    "not_missing",
    "positive_abundance",
    "PresenceFilter",
    "DEFAULT_PRESENCE_FILTER",
]
