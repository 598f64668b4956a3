"""Status fetcher interface for querying Ceph cluster status."""

from abc import ABC, abstractmethod

from rookcheck.core.models import CephClusterTarget


class StatusFetcher(ABC):
    """Abstract source of raw `ceph status` output.

    Implementations decide where the command runs; callers only see the
    JSON text it printed.
    """

    @abstractmethod
    async def fetch_status(self, target: CephClusterTarget) -> str:
        """Fetch raw JSON output of `ceph status`.

        Args:
            target: Operator and cluster namespaces

        Returns:
            Raw stdout of the status command

        Raises:
            CephCommandError: If the command cannot be run
        """
