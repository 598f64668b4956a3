"""Kubernetes provider interface for cluster operations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

POD_PHASE_RUNNING = "Running"


@dataclass
class PodInfo:
    """Normalized pod information."""

    name: str
    namespace: str
    phase: str
    node_name: str

    @property
    def is_running(self) -> bool:
        """Whether the pod is in the Running phase."""
        return self.phase == POD_PHASE_RUNNING

    def as_row(self) -> str:
        """Render the pod as a tab-separated listing row."""
        return f"{self.name}\t{self.phase}\t{self.namespace}\t{self.node_name}"


class KubernetesProvider(ABC):
    """Abstract interface for Kubernetes operations.

    This interface provides cluster-agnostic access to Kubernetes resources,
    hiding implementation details of the kubernetes Python client.

    All methods return normalized data structures (dataclasses) rather than
    native K8s API objects.
    """

    @abstractmethod
    async def get_pods(self, namespace: str, label_selector: str | None = None) -> list[PodInfo]:
        """Get pods in a namespace.

        Args:
            namespace: Namespace to query
            label_selector: Optional label selector (e.g., "app=rook-ceph-mon")

        Returns:
            List of normalized pod information

        Raises:
            KubernetesProviderError: If pods cannot be retrieved
        """

    @abstractmethod
    async def exec_in_pod(
        self, namespace: str, pod_name: str, command: list[str], container: str | None = None
    ) -> dict[str, Any]:
        """Execute a command in a pod.

        Args:
            namespace: Namespace
            pod_name: Pod name
            command: Command to execute
            container: Container name (optional)

        Returns:
            Dictionary with stdout, stderr and the exit code (returncode)

        Raises:
            KubernetesProviderError: If execution fails
        """
