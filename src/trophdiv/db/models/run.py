"""IndexRun and CommunityIndicesRecord SQLAlchemy models."""

from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
    DateTime,
    ForeignKey,
    Index as SQLIndex,
    func,
)
from sqlalchemy.orm import relationship
from .base import Base


class IndexRun(Base):
    """One stored computation of trophic diversity indices."""

    __tablename__ = "index_runs"

    run_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    n_communities = Column(Integer, nullable=False)
    n_species = Column(Integer, nullable=False)
    # "int", "float" or "str": how community labels are rebuilt on load
    label_kind = Column(String(10), nullable=False, default="str")

    created_at = Column(DateTime, server_default=func.now())

    communities = relationship(
        "CommunityIndicesRecord",
        back_populates="run",
        cascade="all, delete-orphan",
        order_by="CommunityIndicesRecord.position",
    )


class CommunityIndicesRecord(Base):
    """
    Indices of one community within a run.

    Keyed by row position so duplicate community labels survive a round trip.
    All index columns are nullable: empty communities store a missing row and
    FROm is missing below 3 trophic levels.
    """

    __tablename__ = "community_indices"

    run_id = Column(
        Integer, ForeignKey("index_runs.run_id"), primary_key=True, nullable=False
    )
    position = Column(Integer, primary_key=True, nullable=False)
    community = Column(String(255), nullable=False)

    abtot = Column(Float)
    nbsp = Column(Integer)
    nbtl = Column(Integer)
    mintl = Column(Float)
    maxtl = Column(Float)
    rgetl = Column(Float)
    meantl = Column(Float)
    sdtl = Column(Float)
    fd_var = Column("FDvar", Float)
    fr_om = Column("FROm", Float)

    run = relationship("IndexRun", back_populates="communities")

    __table_args__ = (
        SQLIndex("idx_community_indices_label", "run_id", "community"),
    )
