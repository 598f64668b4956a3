"""Pod census: point-in-time enumeration of a role's pods."""

from dataclasses import dataclass, field

from rookcheck.core.config import CephConfig
from rookcheck.core.models import DaemonRole
from rookcheck.interfaces.exceptions import KubernetesProviderError
from rookcheck.interfaces.kubernetes_provider import KubernetesProvider, PodInfo
from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CensusResult:
    """Pods of one listing, partitioned by phase and hosting node."""

    namespace: str
    label_selector: str | None = None
    running: list[PodInfo] = field(default_factory=list)
    not_running: list[PodInfo] = field(default_factory=list)
    by_node: dict[str, str] = field(default_factory=dict)
    pods: list[PodInfo] = field(default_factory=list)
    error: str | None = None

    @property
    def distinct_nodes(self) -> int:
        """Number of distinct nodes hosting at least one listed pod."""
        return len(self.by_node)

    @property
    def failed(self) -> bool:
        """Whether the listing itself failed."""
        return self.error is not None


class PodCensus:
    """Lists pods through a KubernetesProvider and partitions them.

    A failed listing is logged and yields an empty census so the caller can
    keep going with the rest of its evaluation.
    """

    def __init__(self, kubernetes_provider: KubernetesProvider, ceph: CephConfig | None = None):
        """Initialize pod census.

        Args:
            kubernetes_provider: Provider used to list pods
            ceph: Ceph configuration holding role label selectors (optional)
        """
        self.k8s = kubernetes_provider
        self.ceph = ceph or CephConfig()

    async def census(self, role: DaemonRole, namespace: str) -> CensusResult:
        """Take a census of a daemon role's pods.

        Args:
            role: Daemon role
            namespace: Namespace to query

        Returns:
            CensusResult for the role
        """
        return await self._take(namespace, self.ceph.label_for(role))

    async def census_all(self, namespace: str) -> CensusResult:
        """Take a census of every pod in a namespace.

        Args:
            namespace: Namespace to query

        Returns:
            CensusResult for the namespace
        """
        return await self._take(namespace, None)

    async def _take(self, namespace: str, label_selector: str | None) -> CensusResult:
        result = CensusResult(namespace=namespace, label_selector=label_selector)

        try:
            pods = await self.k8s.get_pods(namespace, label_selector=label_selector)
        except KubernetesProviderError as e:
            logger.error(
                "census_failed",
                namespace=namespace,
                selector=label_selector,
                error=str(e),
            )
            result.error = str(e)
            return result

        for pod in pods:
            result.pods.append(pod)
            if pod.is_running:
                result.running.append(pod)
            else:
                result.not_running.append(pod)
            result.by_node.setdefault(pod.node_name, pod.name)

        logger.debug(
            "census_taken",
            namespace=namespace,
            selector=label_selector,
            running=len(result.running),
            not_running=len(result.not_running),
            nodes=result.distinct_nodes,
        )
        return result
