"""Node spread check for mon and osd pods."""

from rookcheck.checks.census import PodCensus
from rookcheck.core.models import CephClusterTarget, CheckResult, DaemonRole, ReportEntry, Severity
from rookcheck.interfaces.check import Check, CheckContext
from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)


class DaemonPlacementCheck(Check):
    """Check that a daemon role's pods span enough distinct nodes.

    Every pod of the role is listed whether or not the spread is sufficient.
    """

    def __init__(self, role: DaemonRole):
        """Initialize placement check.

        Args:
            role: Daemon role with a node spread requirement (mon or osd)
        """
        if role.min_nodes < 1:
            raise ValueError(f"role {role.value} has no node spread requirement")
        self.role = role

    @property
    def name(self) -> str:
        """Get check name."""
        return f"{self.role.value}_placement"

    @property
    def description(self) -> str:
        """Get check description."""
        return (
            f"Checking if at least {_count_word(self.role.min_nodes)} {self.role.value} pods "
            "are running on different nodes"
        )

    async def execute(self, target: CephClusterTarget, context: CheckContext) -> CheckResult:
        """Execute placement check.

        Args:
            target: Operator and cluster namespaces
            context: Check context with providers

        Returns:
            CheckResult with the spread verdict and pod listing
        """
        census = PodCensus(context.kubernetes_provider, context.ceph)
        result = await census.census(self.role, target.cluster_namespace)
        entries: list[ReportEntry] = []

        if result.failed:
            entries.append(
                ReportEntry(
                    severity=Severity.ERROR,
                    message=(
                        f"failed to list {self.role.value} pods with label "
                        f"{result.label_selector}: {result.error}"
                    ),
                )
            )

        if result.distinct_nodes < self.role.min_nodes:
            logger.warning(
                "insufficient_node_spread",
                role=self.role.value,
                nodes=result.distinct_nodes,
                required=self.role.min_nodes,
            )
            entries.append(
                ReportEntry(
                    severity=Severity.WARNING,
                    message=(
                        f"At least {_count_word(self.role.min_nodes)} {self.role.value} pods "
                        "should be running on different nodes"
                    ),
                )
            )

        entries.extend(ReportEntry(message=pod.as_row()) for pod in result.pods)
        return self.result(entries)


def _count_word(n: int) -> str:
    words = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five"}
    return words.get(n, str(n))
