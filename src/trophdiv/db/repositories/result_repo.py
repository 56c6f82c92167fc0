"""Repository for stored index runs."""

import logging
from typing import List, Optional

import pandas as pd
from sqlalchemy.orm import Session

from trophdiv.db.models.run import IndexRun, CommunityIndicesRecord
from trophdiv.indices.models import INDEX_COLUMNS, INTEGER_COLUMNS

logger = logging.getLogger(__name__)

# Result column -> record attribute
_COLUMN_ATTRS = {col: col for col in INDEX_COLUMNS}
_COLUMN_ATTRS.update({"FDvar": "fd_var", "FROm": "fr_om"})


def _to_db(value, integer: bool):
    if pd.isna(value):
        return None
    return int(value) if integer else float(value)


def _label_kind(index: pd.Index) -> str:
    if pd.api.types.is_integer_dtype(index):
        return "int"
    if pd.api.types.is_float_dtype(index):
        return "float"
    return "str"


def _restore_labels(labels: List[str], kind: str) -> pd.Index:
    if kind == "int":
        return pd.Index([int(label) for label in labels], dtype="int64")
    if kind == "float":
        return pd.Index([float(label) for label in labels], dtype="float64")
    return pd.Index(labels)


class ResultRepository:
    """Persist and reload result tables."""

    def __init__(self, session: Session):
        self.session = session

    def save_results(
        self,
        name: str,
        results: pd.DataFrame,
        n_species: int,
        commit: bool = True,
    ) -> IndexRun:
        """
        Store a result table as a new run.

        Args:
            name: Human-readable run name
            results: Table returned by TrophicDiversityService.compute
            n_species: Number of species in the input abundance table

        Returns:
            The created IndexRun
        """
        run = IndexRun(
            name=name,
            n_communities=len(results),
            n_species=n_species,
            label_kind=_label_kind(results.index),
        )
        for position, (community, row) in enumerate(results.iterrows()):
            values = {
                attr: _to_db(row[col], col in INTEGER_COLUMNS)
                for col, attr in _COLUMN_ATTRS.items()
            }
            run.communities.append(
                CommunityIndicesRecord(position=position, community=str(community), **values)
            )

        self.session.add(run)
        if commit:
            self.session.commit()
            self.session.refresh(run)
        else:
            self.session.flush()

        logger.info(f"Saved run '{name}' (id={run.run_id}) with {len(results)} communities")
        return run

    def get_run(self, run_id: int) -> Optional[IndexRun]:
        """Get run metadata by ID."""
        return self.session.get(IndexRun, run_id)

    def list_runs(self) -> List[IndexRun]:
        """All runs, most recent first."""
        return (
            self.session.query(IndexRun)
            .order_by(IndexRun.run_id.desc())
            .all()
        )

    def load_results(self, run_id: int) -> pd.DataFrame:
        """
        Rebuild the result table of a stored run.

        Integer and float community labels come back with their numeric
        type; any other label comes back as a string.

        Raises:
            ValueError: If the run does not exist
        """
        run = self.get_run(run_id)
        if run is None:
            raise ValueError(f"Run {run_id} not found")

        rows = [
            {col: getattr(rec, attr) for col, attr in _COLUMN_ATTRS.items()}
            for rec in run.communities
        ]
        labels = _restore_labels([rec.community for rec in run.communities], run.label_kind)
        table = pd.DataFrame(rows, columns=INDEX_COLUMNS, index=labels)
        for col in INDEX_COLUMNS:
            dtype = "Int64" if col in INTEGER_COLUMNS else "float64"
            table[col] = table[col].astype(dtype)
        return table

    def delete_run(self, run_id: int) -> bool:
        """Delete a run and its rows. Returns False if it did not exist."""
        run = self.get_run(run_id)
        if run is None:
            return False
        self.session.delete(run)
        self.session.commit()
        return True
