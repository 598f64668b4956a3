"""Health evaluator running the check sequence for a Ceph cluster."""

from datetime import datetime

from rookcheck.checks.check_registry import CheckRegistry
from rookcheck.core.models import (
    CephClusterTarget,
    CheckResult,
    HealthReport,
    ReportEntry,
    Severity,
)
from rookcheck.interfaces.check import CheckContext
from rookcheck.interfaces.report_sink import ReportSink
from rookcheck.utils.logging import get_logger, log_error

logger = get_logger(__name__)


class HealthEvaluator:
    """Runs every registered check once, in order.

    There is no early exit: a failing check is recorded and the next check
    still runs. Checks are awaited one after another and share no state, so
    each reflects the cluster at the moment it ran.
    """

    def __init__(self, registry: CheckRegistry, context: CheckContext):
        """Initialize health evaluator.

        Args:
            registry: Check registry containing registered checks
            context: Check context with provider dependencies
        """
        self.registry = registry
        self.context = context
        logger.debug("health_evaluator_initialized", checks=len(registry))

    async def evaluate(
        self,
        target: CephClusterTarget,
        sink: ReportSink | None = None,
    ) -> HealthReport:
        """Run all registered checks against a cluster.

        Args:
            target: Operator and cluster namespaces
            sink: Receives each result as soon as its check finishes (optional)

        Returns:
            HealthReport with one result per check
        """
        logger.info(
            "evaluating_cluster_health",
            operator_namespace=target.operator_namespace,
            cluster_namespace=target.cluster_namespace,
        )

        report = HealthReport(target=target)

        try:
            for check in self.registry.get_all_checks():
                logger.debug("executing_check", check_name=check.name)

                try:
                    result = await check.execute(target, self.context)
                except Exception as e:
                    log_error(logger, e, operation="execute_check", check_name=check.name)
                    result = CheckResult(
                        check_name=check.name,
                        description=check.description,
                        entries=[
                            ReportEntry(
                                severity=Severity.FATAL,
                                message=f"Check failed with error: {e}",
                            )
                        ],
                    )

                logger.info(
                    "check_completed",
                    check_name=check.name,
                    worst_severity=result.worst_severity.value,
                )

                report.results.append(result)
                if sink is not None:
                    sink.write(result)
        finally:
            report.finished_at = datetime.utcnow()
            if sink is not None:
                sink.close()

        logger.info(
            "health_evaluation_completed",
            total=len(report.results),
            passed=sum(1 for r in report.results if r.passed),
            worst_severity=report.worst_severity.value,
        )
        return report
