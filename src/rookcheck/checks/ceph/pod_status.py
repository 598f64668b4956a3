"""Running/not-running status of every pod in the Rook namespaces."""

from rookcheck.checks.census import CensusResult, PodCensus
from rookcheck.core.models import CephClusterTarget, CheckResult, ReportEntry, Severity
from rookcheck.interfaces.check import Check, CheckContext

RUNNING_BANNER = "Pods that are in 'Running' status"
NOT_RUNNING_BANNER = "Pods that are 'Not' in 'Running' status"


class PodStatusCheck(Check):
    """List every pod in the operator and cluster namespaces by phase."""

    @property
    def name(self) -> str:
        """Get check name."""
        return "pod_status"

    @property
    def description(self) -> str:
        """Get check description."""
        return "Checking if all pods in the operator and cluster namespaces are running"

    async def execute(self, target: CephClusterTarget, context: CheckContext) -> CheckResult:
        """Execute pod status check.

        The cluster namespace is only listed when it differs from the
        operator namespace, so no pod is reported twice.

        Args:
            target: Operator and cluster namespaces
            context: Check context with providers

        Returns:
            CheckResult with running and not-running listings
        """
        census = PodCensus(context.kubernetes_provider, context.ceph)
        namespaces = [target.operator_namespace]
        if not target.shared_namespace:
            namespaces.append(target.cluster_namespace)

        results: list[CensusResult] = [await census.census_all(ns) for ns in namespaces]

        entries = [
            ReportEntry(
                severity=Severity.ERROR,
                message=f"failed to list pods in namespace {r.namespace}: {r.error}",
            )
            for r in results
            if r.failed
        ]

        entries.append(ReportEntry(severity=Severity.INFO, message=RUNNING_BANNER))
        entries.extend(ReportEntry(message=p.as_row()) for r in results for p in r.running)

        entries.append(ReportEntry(severity=Severity.WARNING, message=NOT_RUNNING_BANNER))
        entries.extend(ReportEntry(message=p.as_row()) for r in results for p in r.not_running)

        return self.result(entries)
