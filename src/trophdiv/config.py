from pydantic import BaseModel


class TrophDivConfig(BaseModel):
    """Config for an index computation run."""
    show_progress: bool = False
    progress_desc: str = "Computing trophic diversity"


# === ACTIVE CONFIG ===
ACTIVE_CONFIG = TrophDivConfig()
