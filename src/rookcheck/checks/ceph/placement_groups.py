"""Placement group state check."""

from rookcheck.checks.ceph.status_source import load_snapshot
from rookcheck.checks.classification import classify_pg_states
from rookcheck.core.models import CephClusterTarget, CheckResult
from rookcheck.interfaces.check import Check, CheckContext
from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)


class PlacementGroupCheck(Check):
    """Classify every placement-group state reported by ceph status.

    `active+clean` is healthy; states containing down, incomplete or
    snaptrim_error are errors; any other state is a warning.
    """

    @property
    def name(self) -> str:
        """Get check name."""
        return "placement_groups"

    @property
    def description(self) -> str:
        """Get check description."""
        return "Checking placement group status"

    async def execute(self, target: CephClusterTarget, context: CheckContext) -> CheckResult:
        """Execute placement group check.

        Args:
            target: Operator and cluster namespaces
            context: Check context with providers

        Returns:
            CheckResult with one finding per placement-group state
        """
        snapshot, failure = await load_snapshot(target, context)
        if failure:
            return self.result([failure])

        logger.debug("pg_states_decoded", states=len(snapshot.placement_group_states))
        return self.result(classify_pg_states(snapshot.placement_group_states))
