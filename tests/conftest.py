"""Pytest configuration and shared fixtures."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from rookcheck.core.config import CephConfig
from rookcheck.core.models import CephClusterTarget
from rookcheck.interfaces.check import CheckContext
from rookcheck.interfaces.exceptions import KubernetesProviderError
from rookcheck.interfaces.kubernetes_provider import PodInfo


@pytest.fixture
def shared_target() -> CephClusterTarget:
    """Operator and cluster in the same namespace (Rook's default layout)."""
    return CephClusterTarget(operator_namespace="rook-ceph", cluster_namespace="rook-ceph")


@pytest.fixture
def split_target() -> CephClusterTarget:
    """Operator and cluster in different namespaces."""
    return CephClusterTarget(
        operator_namespace="rook-ceph-operator", cluster_namespace="rook-ceph-cluster"
    )


def make_pod(
    name: str,
    node: str = "node-1",
    phase: str = "Running",
    namespace: str = "rook-ceph",
) -> PodInfo:
    """Build a normalized pod."""
    return PodInfo(
        name=name,
        namespace=namespace,
        phase=phase,
        node_name=node,
    )


@pytest.fixture
def pod_factory() -> Callable[..., PodInfo]:
    """Provide the pod builder to tests."""
    return make_pod


def routed_get_pods(
    routes: dict[tuple[str, str | None], list[PodInfo] | Exception],
) -> AsyncMock:
    """Build a get_pods mock answering per (namespace, label_selector).

    Unknown routes return no pods. Exception values are raised.
    """

    async def _get_pods(namespace: str, label_selector: str | None = None) -> list[PodInfo]:
        answer = routes.get((namespace, label_selector), [])
        if isinstance(answer, Exception):
            raise answer
        return list(answer)

    return AsyncMock(side_effect=_get_pods)


@pytest.fixture
def route_pods() -> Callable[..., AsyncMock]:
    """Provide the routed get_pods builder to tests."""
    return routed_get_pods


@pytest.fixture
def mock_k8s_provider() -> MagicMock:
    """Provide a mock Kubernetes provider with no pods."""
    provider = MagicMock()
    provider.get_pods = AsyncMock(return_value=[])
    provider.exec_in_pod = AsyncMock(return_value={"stdout": "", "stderr": ""})
    return provider


@pytest.fixture
def mock_status_fetcher() -> MagicMock:
    """Provide a mock status fetcher returning a healthy cluster."""
    fetcher = MagicMock()
    fetcher.fetch_status = AsyncMock(return_value=ceph_status_json())
    return fetcher


@pytest.fixture
def mock_context(mock_k8s_provider: MagicMock, mock_status_fetcher: MagicMock) -> CheckContext:
    """Provide a check context wired to the mock providers."""
    return CheckContext(
        kubernetes_provider=mock_k8s_provider,
        status_fetcher=mock_status_fetcher,
        ceph=CephConfig(),
    )


def ceph_status_json(
    health: str = "HEALTH_OK",
    pgs_by_state: list[dict[str, Any]] | None = None,
) -> str:
    """Render a realistic `ceph -s --format json` document."""
    if pgs_by_state is None:
        pgs_by_state = [{"state_name": "active+clean", "count": 33}]
    return json.dumps(
        {
            "fsid": "0a7c8a7e-3f1c-4a9b-9d3b-8e1f0c2d7b11",
            "health": {"status": health, "checks": {}, "mutes": []},
            "election_epoch": 12,
            "quorum": [0, 1, 2],
            "quorum_names": ["a", "b", "c"],
            "monmap": {"epoch": 3, "num_mons": 3},
            "osdmap": {"epoch": 41, "num_osds": 3, "num_up_osds": 3, "num_in_osds": 3},
            "pgmap": {
                "pgs_by_state": pgs_by_state,
                "num_pgs": sum(p["count"] for p in pgs_by_state),
                "num_pools": 2,
                "bytes_used": 85983232,
            },
            "mgrmap": {"available": True, "num_standbys": 0},
        }
    )


@pytest.fixture
def status_json() -> Callable[..., str]:
    """Provide the ceph status document builder to tests."""
    return ceph_status_json


@pytest.fixture
def provider_error() -> KubernetesProviderError:
    """A typical provider failure."""
    return KubernetesProviderError("Failed to get pods in rook-ceph: Forbidden")


# ==============================================================================
# Pytest Markers
# ==============================================================================


def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
