"""Unit tests for CephCommandRunner."""

from unittest.mock import AsyncMock

import pytest

from rookcheck.ceph.command_runner import CephCommandRunner
from rookcheck.checks.ceph import CephHealthCheck
from rookcheck.core.config import CephConfig
from rookcheck.core.exceptions import CephCommandError
from rookcheck.core.models import ReportEntry, Severity
from rookcheck.interfaces.check import CheckContext
from rookcheck.interfaces.exceptions import KubernetesProviderError


@pytest.fixture
def operator_running(mock_k8s_provider, pod_factory, route_pods):
    """Route the operator label to one pending and one running operator pod."""
    mock_k8s_provider.get_pods = route_pods(
        {
            ("rook-ceph", "app=rook-ceph-operator"): [
                pod_factory("rook-ceph-operator-old", phase="Pending"),
                pod_factory("rook-ceph-operator-5d7f"),
            ],
            ("rook-ceph", "app=rook-ceph-osd,ceph-osd-id=2"): [
                pod_factory("rook-ceph-osd-2-7c9f", node="node-3"),
            ],
        }
    )
    mock_k8s_provider.exec_in_pod = AsyncMock(
        return_value={"stdout": '{"health": {}}', "stderr": ""}
    )
    return mock_k8s_provider


class TestOperatorCommands:
    """Tests for commands run in the operator pod."""

    def test_operator_args(self, mock_k8s_provider) -> None:
        """Test connection flags point at the cluster's config and keyring."""
        runner = CephCommandRunner(mock_k8s_provider)

        assert runner.operator_args(["osd", "tree"], "storage") == [
            "ceph",
            "osd",
            "tree",
            "--connect-timeout=10",
            "--conf=/var/lib/rook/storage/storage.config",
            "--keyring=/var/lib/rook/storage/client.admin.keyring",
        ]

    @pytest.mark.asyncio
    async def test_fetch_status_runs_in_running_operator_pod(
        self, operator_running, shared_target
    ) -> None:
        """Test status is fetched from the running operator pod in its container."""
        runner = CephCommandRunner(operator_running)

        output = await runner.fetch_status(shared_target)

        assert output == '{"health": {}}'
        operator_running.exec_in_pod.assert_awaited_once()
        namespace, pod_name, command = operator_running.exec_in_pod.await_args.args
        assert namespace == "rook-ceph"
        assert pod_name == "rook-ceph-operator-5d7f"
        assert command[:4] == ["ceph", "-s", "--format", "json"]
        assert operator_running.exec_in_pod.await_args.kwargs == {
            "container": "rook-ceph-operator"
        }

    @pytest.mark.asyncio
    async def test_operator_pod_not_running(
        self, mock_k8s_provider, pod_factory, shared_target
    ) -> None:
        """Test a missing running operator pod is a command error."""
        mock_k8s_provider.get_pods.return_value = [
            pod_factory("rook-ceph-operator-5d7f", phase="CrashLoopBackOff")
        ]

        with pytest.raises(CephCommandError, match="operator pod is not running"):
            await CephCommandRunner(mock_k8s_provider).fetch_status(shared_target)

        mock_k8s_provider.exec_in_pod.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_operator_listing_failure(
        self, mock_k8s_provider, provider_error, shared_target
    ) -> None:
        """Test a provider failure while finding the operator is wrapped."""
        mock_k8s_provider.get_pods.side_effect = provider_error

        with pytest.raises(CephCommandError, match="failed to list operator pods"):
            await CephCommandRunner(mock_k8s_provider).fetch_status(shared_target)

    @pytest.mark.asyncio
    async def test_exec_failure_is_wrapped(self, operator_running, shared_target) -> None:
        """Test an exec failure surfaces as CephCommandError."""
        operator_running.exec_in_pod.side_effect = KubernetesProviderError("stream closed")

        with pytest.raises(CephCommandError, match="stream closed"):
            await CephCommandRunner(operator_running).fetch_status(shared_target)

    @pytest.mark.asyncio
    async def test_non_zero_exit_raises_with_stderr(self, operator_running, shared_target) -> None:
        """Test a failing ceph command raises with its error output."""
        operator_running.exec_in_pod.return_value = {
            "stdout": "",
            "stderr": "[errno 110] RADOS timed out (error connecting to the cluster)\n",
            "returncode": 1,
        }

        with pytest.raises(CephCommandError) as exc_info:
            await CephCommandRunner(operator_running).run(["osd", "tree"], shared_target)

        assert str(exc_info.value) == (
            "ceph exited with code 1 in pod rook-ceph-operator-5d7f: "
            "[errno 110] RADOS timed out (error connecting to the cluster)"
        )

    @pytest.mark.asyncio
    async def test_stderr_with_zero_exit_still_returns_stdout(
        self, operator_running, shared_target
    ) -> None:
        """Test warnings on stderr do not fail a successful command."""
        operator_running.exec_in_pod.return_value = {
            "stdout": "HEALTH_OK\n",
            "stderr": "clock skew detected",
            "returncode": 0,
        }

        output = await CephCommandRunner(operator_running).run(["health"], shared_target)

        assert output == "HEALTH_OK\n"

    @pytest.mark.asyncio
    async def test_failed_status_command_is_reported_as_fetch_error(
        self, operator_running, shared_target
    ) -> None:
        """Test a failing `ceph -s` becomes an ERROR entry naming the cause."""
        operator_running.exec_in_pod.return_value = {
            "stdout": "",
            "stderr": "[errno 110] RADOS timed out",
            "returncode": 1,
        }
        runner = CephCommandRunner(operator_running)
        context = CheckContext(kubernetes_provider=operator_running, status_fetcher=runner)

        result = await CephHealthCheck().execute(shared_target, context)

        assert result.entries == [
            ReportEntry(
                severity=Severity.ERROR,
                message=(
                    "failed to fetch ceph status: ceph exited with code 1 in pod "
                    "rook-ceph-operator-5d7f: [errno 110] RADOS timed out"
                ),
            )
        ]

    @pytest.mark.asyncio
    async def test_custom_operator_settings(
        self, mock_k8s_provider, pod_factory, route_pods, split_target
    ) -> None:
        """Test configured operator label, container and timeout are used."""
        ceph = CephConfig(
            operator_label="app=my-operator", operator_container="operator", connect_timeout=3
        )
        mock_k8s_provider.get_pods = route_pods(
            {
                ("rook-ceph-operator", "app=my-operator"): [
                    pod_factory("my-operator-1", namespace="rook-ceph-operator")
                ]
            }
        )

        await CephCommandRunner(mock_k8s_provider, ceph).run(["df"], split_target)

        namespace, pod_name, command = mock_k8s_provider.exec_in_pod.await_args.args
        assert (namespace, pod_name) == ("rook-ceph-operator", "my-operator-1")
        assert "--connect-timeout=3" in command
        assert "--conf=/var/lib/rook/rook-ceph-cluster/rook-ceph-cluster.config" in command
        assert mock_k8s_provider.exec_in_pod.await_args.kwargs == {"container": "operator"}


class TestOsdDaemonCommands:
    """Tests for admin socket commands routed to OSD pods."""

    @pytest.mark.asyncio
    async def test_daemon_osd_runs_in_osd_pod(self, operator_running, shared_target) -> None:
        """Test `daemon osd.N` runs through a shell in the OSD container."""
        runner = CephCommandRunner(operator_running)

        await runner.run(["daemon", "osd.2", "dump_historic_ops"], shared_target)

        operator_running.exec_in_pod.assert_awaited_once()
        namespace, pod_name, command = operator_running.exec_in_pod.await_args.args
        assert pod_name == "rook-ceph-osd-2-7c9f"
        assert command == ["sh", "-c", "CEPH_ARGS='' ceph daemon osd.2 dump_historic_ops"]
        assert operator_running.exec_in_pod.await_args.kwargs == {"container": "osd"}

    @pytest.mark.asyncio
    async def test_daemon_osd_missing_pod(self, operator_running, shared_target) -> None:
        """Test an unknown OSD id is a command error."""
        with pytest.raises(CephCommandError, match="no pod found for osd.9"):
            await CephCommandRunner(operator_running).run(["daemon", "osd.9", "status"], shared_target)

    @pytest.mark.asyncio
    async def test_daemon_for_other_daemon_goes_to_operator(
        self, operator_running, shared_target
    ) -> None:
        """Test non-OSD daemon commands are not routed to OSD pods."""
        await CephCommandRunner(operator_running).run(["daemon", "mon.a", "status"], shared_target)

        _, pod_name, _ = operator_running.exec_in_pod.await_args.args
        assert pod_name == "rook-ceph-operator-5d7f"

    @pytest.mark.asyncio
    async def test_arguments_are_shell_quoted(self, operator_running, shared_target) -> None:
        """Test arguments with spaces stay a single shell word."""
        await CephCommandRunner(operator_running).run(
            ["daemon", "osd.2", "config", "get", "debug osd"], shared_target
        )

        _, _, command = operator_running.exec_in_pod.await_args.args
        assert command[2].endswith("config get 'debug osd'")
