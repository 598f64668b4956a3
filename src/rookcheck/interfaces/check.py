"""Health check interface for Ceph cluster inspection."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rookcheck.core.config import CephConfig
from rookcheck.core.models import CephClusterTarget, CheckResult

if TYPE_CHECKING:
    from rookcheck.interfaces.kubernetes_provider import KubernetesProvider
    from rookcheck.interfaces.status_fetcher import StatusFetcher


@dataclass
class CheckContext:
    """Context passed to health checks containing dependencies."""

    kubernetes_provider: "KubernetesProvider"
    status_fetcher: "StatusFetcher"
    ceph: CephConfig = field(default_factory=CephConfig)


class Check(ABC):
    """Abstract interface for health checks.

    Each check queries its own data, so checks never share state and one
    check's failure does not affect the others.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the check name for logging/reporting.

        Returns:
            Check name
        """

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the banner line announcing what this check validates.

        Returns:
            Description of the check's purpose
        """

    @abstractmethod
    async def execute(self, target: CephClusterTarget, context: CheckContext) -> CheckResult:
        """Execute the health check.

        Args:
            target: Operator and cluster namespaces
            context: Check context with provider dependencies

        Returns:
            CheckResult with findings and listing lines
        """

    def result(self, entries: list | None = None) -> CheckResult:
        """Build a result for this check.

        Args:
            entries: Report entries (optional)

        Returns:
            CheckResult named after this check
        """
        return CheckResult(
            check_name=self.name,
            description=self.description,
            entries=entries or [],
        )
