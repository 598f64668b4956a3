"""Mon quorum and overall ceph health check."""

from rookcheck.checks.ceph.status_source import load_snapshot
from rookcheck.checks.classification import classify_health
from rookcheck.core.models import CephClusterTarget, CheckResult
from rookcheck.interfaces.check import Check, CheckContext


class CephHealthCheck(Check):
    """Classify the cluster's overall health status."""

    @property
    def name(self) -> str:
        """Get check name."""
        return "ceph_health"

    @property
    def description(self) -> str:
        """Get check description."""
        return "Checking mon quorum and ceph health details"

    async def execute(self, target: CephClusterTarget, context: CheckContext) -> CheckResult:
        """Execute health status check."""
        snapshot, failure = await load_snapshot(target, context)
        if failure:
            return self.result([failure])

        return self.result([classify_health(snapshot.overall_health)])
