"""Manager pod presence check."""

from rookcheck.checks.census import PodCensus
from rookcheck.core.models import CephClusterTarget, CheckResult, DaemonRole, ReportEntry, Severity
from rookcheck.interfaces.check import Check, CheckContext


class MgrPodCheck(Check):
    """Check that at least one mgr pod exists in the cluster namespace."""

    @property
    def name(self) -> str:
        """Get check name."""
        return "mgr_pods"

    @property
    def description(self) -> str:
        """Get check description."""
        return "Checking if at least one mgr pod is running"

    async def execute(self, target: CephClusterTarget, context: CheckContext) -> CheckResult:
        """Execute mgr pod check.

        A failed listing is reported as an error without a count verdict.

        Args:
            target: Operator and cluster namespaces
            context: Check context with providers

        Returns:
            CheckResult with the count verdict or the mgr pod listing
        """
        census = PodCensus(context.kubernetes_provider, context.ceph)
        result = await census.census(DaemonRole.MGR, target.cluster_namespace)

        if result.failed:
            return self.result(
                [
                    ReportEntry(
                        severity=Severity.ERROR,
                        message=(
                            f"failed to list mgr pods with label {result.label_selector}: "
                            f"{result.error}"
                        ),
                    )
                ]
            )

        if not result.pods:
            return self.result(
                [
                    ReportEntry(
                        severity=Severity.WARNING,
                        message="At least one mgr pod should be running",
                    )
                ]
            )

        return self.result([ReportEntry(message=pod.as_row()) for pod in result.pods])
