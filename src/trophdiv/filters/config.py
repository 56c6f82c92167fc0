from .predicates import not_missing, positive_abundance
from .composer import PresenceFilter


# === DEFAULT PRESENCE FILTER ===
# A species is present when its abundance is recorded and > 0
DEFAULT_PRESENCE_FILTER = (
    PresenceFilter()
    .add(not_missing())
    .add(positive_abundance())
)
