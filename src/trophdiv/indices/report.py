"""Per-run outcome report of an index computation."""

from typing import Any, List
from pydantic import BaseModel, Field


class CommunityFailure(BaseModel):
    """A community that produced no indices."""

    position: int = Field(description="Row position in the abundance table")
    community: Any
    reason: str


class ComputationReport(BaseModel):
    """Track per-community outcome of an index computation run."""

    attempted: List[Any] = Field(default_factory=list)
    computed: List[Any] = Field(default_factory=list)
    failures: List[CommunityFailure] = Field(default_factory=list)
    evenness_skipped: List[Any] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.computed)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def failed_communities(self) -> List[Any]:
        return [f.community for f in self.failures]

    def add_attempt(self, community: Any) -> None:
        self.attempted.append(community)

    def add_success(self, community: Any, evenness_defined: bool) -> None:
        self.computed.append(community)
        if not evenness_defined:
            self.evenness_skipped.append(community)

    def add_failure(self, position: int, community: Any, error: str) -> None:
        self.failures.append(
            CommunityFailure(position=position, community=community, reason=error)
        )
