"""Kubernetes client for cluster operations."""

from typing import Any

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.client.models import V1Pod
from kubernetes.stream import stream

from rookcheck.core.exceptions import KubernetesError
from rookcheck.utils.logging import get_logger
from rookcheck.utils.retry import is_transient_api_error, retry_on_exception

logger = get_logger(__name__)


class KubernetesClient:
    """Kubernetes client wrapper."""

    def __init__(self, kubeconfig_path: str | None = None, context: str | None = None):
        """Initialize Kubernetes client.

        Args:
            kubeconfig_path: Path to kubeconfig file (optional)
            context: Kubernetes context to use (optional)
        """
        try:
            if kubeconfig_path:
                config.load_kube_config(config_file=kubeconfig_path, context=context)
            else:
                # Try to load from default location or in-cluster config
                try:
                    config.load_kube_config(context=context)
                except config.ConfigException:
                    config.load_incluster_config()

            self.core_v1 = client.CoreV1Api()

            logger.debug("k8s_client_initialized", context=context)

        except Exception as e:
            logger.error("k8s_client_initialization_failed", error=str(e))
            raise KubernetesError("Failed to initialize Kubernetes client") from e

    @retry_on_exception(
        exceptions=(ApiException,),
        max_attempts=3,
        should_retry=is_transient_api_error,
    )
    def _list_namespaced_pod(self, namespace: str, label_selector: str | None) -> list[V1Pod]:
        if label_selector:
            response = self.core_v1.list_namespaced_pod(
                namespace=namespace, label_selector=label_selector
            )
        else:
            response = self.core_v1.list_namespaced_pod(namespace=namespace)
        return response.items

    def get_pods(
        self, namespace: str = "default", label_selector: str | None = None
    ) -> list[V1Pod]:
        """Get pods in a namespace.

        Transient API errors (throttling, 5xx) are retried before giving up.

        Args:
            namespace: Namespace to query
            label_selector: Label selector (e.g., "app=rook-ceph-mon")

        Returns:
            List of V1Pod objects

        Raises:
            KubernetesError: If pods cannot be retrieved
        """
        try:
            logger.debug("getting_pods", namespace=namespace, selector=label_selector)

            pods = self._list_namespaced_pod(namespace, label_selector)

            logger.info("pods_retrieved", namespace=namespace, count=len(pods))
            return pods

        except ApiException as e:
            logger.error(
                "get_pods_failed",
                namespace=namespace,
                status=e.status,
                reason=e.reason,
            )
            raise KubernetesError(f"Failed to get pods in {namespace}: {e.reason}") from e

    def exec_in_pod(
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
            command: Command to execute as a list (e.g., ["ceph", "-s"])
            container: Container name (optional, uses first container if not specified)

        Returns:
            Dictionary with 'stdout', 'stderr' and 'returncode' keys

        Raises:
            KubernetesError: If execution fails
        """
        try:
            logger.debug(
                "exec_in_pod",
                namespace=namespace,
                pod_name=pod_name,
                command=command,
                container=container,
            )

            resp = stream(
                self.core_v1.connect_get_namespaced_pod_exec,
                pod_name,
                namespace,
                command=command,
                container=container,
                stderr=True,
                stdin=False,
                stdout=True,
                tty=False,
                _preload_content=False,
            )

            stdout_lines = []
            stderr_lines = []

            while resp.is_open():
                resp.update(timeout=1)
                if resp.peek_stdout():
                    stdout_lines.append(resp.read_stdout())
                if resp.peek_stderr():
                    stderr_lines.append(resp.read_stderr())

            resp.close()

            stdout = "".join(stdout_lines)
            stderr = "".join(stderr_lines)
            # Read from the status channel, None when the server sent no status
            returncode = resp.returncode

            logger.info(
                "exec_in_pod_completed",
                namespace=namespace,
                pod_name=pod_name,
                stdout_len=len(stdout),
                stderr_len=len(stderr),
                returncode=returncode,
            )

            return {"stdout": stdout, "stderr": stderr, "returncode": returncode}

        except ApiException as e:
            logger.error(
                "exec_in_pod_failed",
                namespace=namespace,
                pod_name=pod_name,
                status=e.status,
                reason=e.reason,
            )
            raise KubernetesError(f"Failed to exec in pod {pod_name}: {e.reason}") from e
        except Exception as e:
            logger.error(
                "exec_in_pod_unexpected_error",
                namespace=namespace,
                pod_name=pod_name,
                error=str(e),
            )
            raise KubernetesError(f"Unexpected error executing in pod {pod_name}: {e}") from e
