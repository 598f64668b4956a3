"""Run ceph CLI commands inside Rook pods."""

import shlex

from rookcheck.core.config import CephConfig
from rookcheck.core.exceptions import CephCommandError
from rookcheck.core.models import CephClusterTarget, DaemonRole
from rookcheck.interfaces.exceptions import KubernetesProviderError
from rookcheck.interfaces.kubernetes_provider import KubernetesProvider, PodInfo
from rookcheck.interfaces.status_fetcher import StatusFetcher
from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)

CEPH_BINARY = "ceph"
STATUS_ARGS = ["-s", "--format", "json"]


class CephCommandRunner(StatusFetcher):
    """Runs ceph commands in the Rook operator pod or an OSD pod.

    The operator pod holds the admin keyring and the generated ceph config
    for every cluster it manages, so cluster-wide commands run there. Admin
    socket commands (`ceph daemon osd.N ...`) have to run next to the daemon.
    """

    def __init__(self, kubernetes_provider: KubernetesProvider, ceph: CephConfig | None = None):
        """Initialize command runner.

        Args:
            kubernetes_provider: Provider used to find pods and exec into them
            ceph: Ceph access configuration (optional)
        """
        self.k8s = kubernetes_provider
        self.ceph = ceph or CephConfig()

    def operator_args(self, args: list[str], cluster_namespace: str) -> list[str]:
        """Build the full command line run in the operator pod.

        Args:
            args: Arguments passed to the ceph CLI
            cluster_namespace: Namespace of the CephCluster

        Returns:
            Command list including connection flags for the cluster
        """
        rook_dir = f"/var/lib/rook/{cluster_namespace}"
        return [
            CEPH_BINARY,
            *args,
            f"--connect-timeout={self.ceph.connect_timeout}",
            f"--conf={rook_dir}/{cluster_namespace}.config",
            f"--keyring={rook_dir}/client.admin.keyring",
        ]

    async def find_operator_pod(self, target: CephClusterTarget) -> PodInfo:
        """Find a running operator pod.

        Args:
            target: Operator and cluster namespaces

        Returns:
            First running operator pod

        Raises:
            CephCommandError: If no operator pod is running
        """
        try:
            pods = await self.k8s.get_pods(
                target.operator_namespace, label_selector=self.ceph.operator_label
            )
        except KubernetesProviderError as e:
            raise CephCommandError(f"failed to list operator pods: {e}") from e

        for pod in pods:
            if pod.is_running:
                return pod

        raise CephCommandError(
            f"operator pod is not running in namespace {target.operator_namespace}"
        )

    async def run_in_operator(self, args: list[str], target: CephClusterTarget) -> str:
        """Run a ceph command in the operator pod.

        Args:
            args: Arguments passed to the ceph CLI
            target: Operator and cluster namespaces

        Returns:
            Command stdout

        Raises:
            CephCommandError: If the operator pod is missing or exec fails
        """
        pod = await self.find_operator_pod(target)
        command = self.operator_args(args, target.cluster_namespace)
        return await self._exec(
            pod.namespace or target.operator_namespace,
            pod.name,
            command,
            self.ceph.operator_container,
        )

    async def run_in_osd(self, osd_id: str, args: list[str], target: CephClusterTarget) -> str:
        """Run a ceph admin socket command in an OSD pod.

        Args:
            osd_id: OSD id (the N of osd.N)
            args: Arguments passed to the ceph CLI, starting with "daemon"
            target: Operator and cluster namespaces

        Returns:
            Command stdout

        Raises:
            CephCommandError: If the OSD pod is missing or exec fails
        """
        selector = f"{self.ceph.label_for(DaemonRole.OSD)},ceph-osd-id={osd_id}"
        try:
            pods = await self.k8s.get_pods(target.cluster_namespace, label_selector=selector)
        except KubernetesProviderError as e:
            raise CephCommandError(f"failed to list pods for osd.{osd_id}: {e}") from e

        if not pods:
            raise CephCommandError(
                f"no pod found for osd.{osd_id} in namespace {target.cluster_namespace}"
            )

        # Admin socket commands ignore the cluster connection settings in CEPH_ARGS
        shell = f"CEPH_ARGS='' {CEPH_BINARY} {shlex.join(args)}"
        return await self._exec(
            pods[0].namespace or target.cluster_namespace,
            pods[0].name,
            ["sh", "-c", shell],
            self.ceph.osd_container,
        )

    async def run(self, args: list[str], target: CephClusterTarget) -> str:
        """Run a ceph command in the pod it belongs to.

        `daemon osd.N ...` goes to the OSD pod, everything else to the
        operator pod.

        Args:
            args: Arguments passed to the ceph CLI
            target: Operator and cluster namespaces

        Returns:
            Command stdout
        """
        if len(args) > 1 and args[0] == "daemon" and args[1].startswith("osd."):
            return await self.run_in_osd(args[1].removeprefix("osd."), args, target)
        return await self.run_in_operator(args, target)

    async def fetch_status(self, target: CephClusterTarget) -> str:
        """Fetch `ceph status` as JSON from the operator pod.

        Args:
            target: Operator and cluster namespaces

        Returns:
            Raw JSON text
        """
        return await self.run_in_operator(STATUS_ARGS, target)

    async def _exec(
        self, namespace: str, pod_name: str, command: list[str], container: str
    ) -> str:
        logger.debug("running_ceph_command", pod=pod_name, namespace=namespace, command=command)

        try:
            output = await self.k8s.exec_in_pod(
                namespace, pod_name, command, container=container
            )
        except KubernetesProviderError as e:
            raise CephCommandError(f"failed to run {command[0]} in pod {pod_name}: {e}") from e

        stderr = output.get("stderr", "").strip()
        returncode = output.get("returncode")
        if returncode:
            logger.error(
                "ceph_command_failed", pod=pod_name, returncode=returncode, stderr=stderr
            )
            raise CephCommandError(
                f"{CEPH_BINARY} exited with code {returncode} in pod {pod_name}: "
                f"{stderr or 'no error output'}"
            )

        if stderr:
            logger.warning("ceph_command_stderr", pod=pod_name, stderr=stderr)

        return output.get("stdout", "")
