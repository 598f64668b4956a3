"""Core data models for rookcheck."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severity channel every finding resolves to."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        """Ordering used to pick the worst severity of a set of findings."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.INFO: 0,
    Severity.WARNING: 1,
    Severity.ERROR: 2,
    Severity.FATAL: 3,
}


class DaemonRole(str, Enum):
    """Ceph daemon roles whose pods are inspected."""

    MON = "mon"
    OSD = "osd"
    MGR = "mgr"

    @property
    def default_label_selector(self) -> str:
        """Label selector Rook puts on pods of this role."""
        return f"app=rook-ceph-{self.value}"

    @property
    def min_nodes(self) -> int:
        """Number of distinct nodes the role's pods are expected to span."""
        return 3 if self in (DaemonRole.MON, DaemonRole.OSD) else 0


class CephClusterTarget(BaseModel):
    """Namespaces of the Rook operator and the Ceph cluster it manages."""

    model_config = ConfigDict(frozen=True)

    operator_namespace: str = Field("rook-ceph", description="Rook operator namespace")
    cluster_namespace: str = Field("rook-ceph", description="CephCluster namespace")

    @property
    def shared_namespace(self) -> bool:
        """Whether operator and cluster live in the same namespace."""
        return self.operator_namespace == self.cluster_namespace


class PlacementGroupStateEntry(BaseModel):
    """Number of placement groups currently in one composite state."""

    model_config = ConfigDict(frozen=True, strict=True)

    state_name: str
    count: int = Field(..., ge=0)


class ClusterStatusSnapshot(BaseModel):
    """Decoded result of a single `ceph status` query."""

    model_config = ConfigDict(frozen=True)

    overall_health: str
    placement_group_states: tuple[PlacementGroupStateEntry, ...] = ()


class ReportEntry(BaseModel):
    """One line of a check's output.

    A severity marks a classified finding. Entries without a severity are plain
    tabular listing lines.
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity | None = None
    message: str

    @property
    def is_listing(self) -> bool:
        """Whether this is a tabular listing line rather than a finding."""
        return self.severity is None


class CheckResult(BaseModel):
    """Result of a health check."""

    check_name: str
    description: str
    entries: list[ReportEntry] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    @property
    def findings(self) -> list[ReportEntry]:
        """Entries that carry a severity."""
        return [e for e in self.entries if e.severity is not None]

    @property
    def listings(self) -> list[ReportEntry]:
        """Tabular listing lines."""
        return [e for e in self.entries if e.severity is None]

    @property
    def worst_severity(self) -> Severity:
        """Highest severity among findings (INFO when there are none)."""
        return max(
            (e.severity for e in self.findings),
            key=lambda s: s.rank,
            default=Severity.INFO,
        )

    @property
    def passed(self) -> bool:
        """True when no finding reached ERROR or FATAL."""
        return self.worst_severity.rank < Severity.ERROR.rank


class HealthReport(BaseModel):
    """All check results of one evaluation pass."""

    target: CephClusterTarget
    results: list[CheckResult] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=datetime.utcnow)
    finished_at: datetime | None = None

    @property
    def worst_severity(self) -> Severity:
        """Highest severity across all checks."""
        return max(
            (r.worst_severity for r in self.results),
            key=lambda s: s.rank,
            default=Severity.INFO,
        )

    @property
    def passed(self) -> bool:
        """True when every check passed."""
        return all(r.passed for r in self.results)
