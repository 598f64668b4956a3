"""Contract tests for Check interface.

All Check implementations must pass these tests to ensure substitutability.
"""

import pytest

from rookcheck.checks.ceph import (
    CephHealthCheck,
    DaemonPlacementCheck,
    MgrPodCheck,
    PlacementGroupCheck,
    PodStatusCheck,
)
from rookcheck.core.models import CephClusterTarget, CheckResult, DaemonRole
from rookcheck.interfaces.check import Check, CheckContext


class CheckContract:
    """Base contract tests for Check interface."""

    @pytest.fixture
    def check(self) -> Check:
        """Subclass must provide concrete Check implementation."""
        raise NotImplementedError("Subclass must implement check fixture")

    def test_check_has_name(self, check: Check):
        """Check must have a name."""
        assert isinstance(check.name, str)
        assert len(check.name) > 0

    def test_check_has_description(self, check: Check):
        """Check must have a banner description."""
        assert isinstance(check.description, str)
        assert check.description.startswith("Checking")

    @pytest.mark.asyncio
    async def test_execute_returns_check_result(
        self,
        check: Check,
        shared_target: CephClusterTarget,
        mock_context: CheckContext,
    ):
        """Execute must return a CheckResult named after the check."""
        result = await check.execute(shared_target, mock_context)

        assert isinstance(result, CheckResult)
        assert result.check_name == check.name
        assert result.description == check.description

    @pytest.mark.asyncio
    async def test_execute_survives_provider_failures(
        self,
        check: Check,
        shared_target: CephClusterTarget,
        mock_context: CheckContext,
        provider_error,
    ):
        """Provider failures must become findings, not exceptions."""
        mock_context.kubernetes_provider.get_pods.side_effect = provider_error
        mock_context.status_fetcher.fetch_status.return_value = "not json"

        result = await check.execute(shared_target, mock_context)

        assert result.findings


class TestMonPlacementContract(CheckContract):
    @pytest.fixture
    def check(self) -> Check:
        return DaemonPlacementCheck(DaemonRole.MON)


class TestOsdPlacementContract(CheckContract):
    @pytest.fixture
    def check(self) -> Check:
        return DaemonPlacementCheck(DaemonRole.OSD)


class TestCephHealthContract(CheckContract):
    @pytest.fixture
    def check(self) -> Check:
        return CephHealthCheck()


class TestPodStatusContract(CheckContract):
    @pytest.fixture
    def check(self) -> Check:
        return PodStatusCheck()


class TestPlacementGroupContract(CheckContract):
    @pytest.fixture
    def check(self) -> Check:
        return PlacementGroupCheck()


class TestMgrPodContract(CheckContract):
    @pytest.fixture
    def check(self) -> Check:
        return MgrPodCheck()


@pytest.mark.parametrize("member", [Check.name, Check.description, Check.execute, Check.result])
def test_interface_docstrings_close_on_their_own_line(member):
    """Interface docstrings end with the closing quotes on a separate line."""
    last_line = member.__doc__.splitlines()[-1]

    assert last_line.strip() == ""
