"""Kubernetes adapter implementing KubernetesProvider interface."""

from typing import Any

from rookcheck.clients.kubernetes_client import KubernetesClient
from rookcheck.interfaces.exceptions import KubernetesProviderError
from rookcheck.interfaces.kubernetes_provider import KubernetesProvider, PodInfo
from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)


class KubernetesAdapter(KubernetesProvider):
    """Adapter wrapping KubernetesClient to implement KubernetesProvider interface.

    This adapter normalizes Kubernetes API responses into clean dataclasses,
    hiding kubernetes Python client implementation details.
    """

    def __init__(self, kubeconfig_path: str | None = None, context: str | None = None):
        """Initialize Kubernetes adapter.

        Args:
            kubeconfig_path: Path to kubeconfig file (optional)
            context: Kubernetes context to use (optional)
        """
        try:
            self.client = KubernetesClient(kubeconfig_path=kubeconfig_path, context=context)
            logger.debug("k8s_adapter_initialized", context=context)
        except Exception as e:
            raise KubernetesProviderError(f"Failed to initialize K8s adapter: {e}") from e

    async def get_pods(self, namespace: str, label_selector: str | None = None) -> list[PodInfo]:
        """Get pods in a namespace.

        Args:
            namespace: Namespace to query
            label_selector: Optional label selector

        Returns:
            List of normalized pod information

        Raises:
            KubernetesProviderError: If pods cannot be retrieved
        """
        try:
            pods = self.client.get_pods(namespace=namespace, label_selector=label_selector)

            return [
                PodInfo(
                    name=pod.metadata.name,
                    namespace=pod.metadata.namespace,
                    phase=pod.status.phase or "Unknown",
                    # Unscheduled pods have no node yet
                    node_name=(pod.spec.node_name if pod.spec else None) or "",
                )
                for pod in pods
            ]

        except Exception as e:
            logger.error(
                "get_pods_failed",
                namespace=namespace,
                selector=label_selector,
                error=str(e),
            )
            raise KubernetesProviderError(f"Failed to get pods in {namespace}: {e}") from e

    async def exec_in_pod(
        self,
        namespace: str,
        pod_name: str,
        command: list[str],
        container: str | None = None,
    ) -> dict[str, Any]:
        """Execute a command in a pod.

        Args:
            namespace: Namespace
            pod_name: Pod name
            command: Command to execute (list of strings)
            container: Container name (optional)

        Returns:
            Dictionary with stdout, stderr and the exit code (returncode)

        Raises:
            KubernetesProviderError: If execution fails
        """
        try:
            return self.client.exec_in_pod(
                namespace=namespace,
                pod_name=pod_name,
                command=command,
                container=container,
            )

        except Exception as e:
            logger.error(
                "exec_in_pod_failed",
                namespace=namespace,
                pod_name=pod_name,
                error=str(e),
            )
            raise KubernetesProviderError(f"Failed to exec in pod {pod_name}: {e}") from e
