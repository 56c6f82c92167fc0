import os

# Default to a local SQLite file when no database is configured
DATABASE_URL = os.getenv(
    "TROPHDIV_DATABASE_URL",
    "sqlite:///./trophdiv.db"
)
