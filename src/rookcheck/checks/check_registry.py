"""Registry for managing health checks."""

from rookcheck.core.models import DaemonRole
from rookcheck.interfaces.check import Check
from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)


class CheckRegistry:
    """Ordered registry of health checks.

    Checks run in registration order.
    """

    def __init__(self) -> None:
        """Initialize check registry."""
        self._checks: list[Check] = []
        self._checks_by_name: dict[str, Check] = {}
        logger.debug("check_registry_initialized")

    def register(self, check: Check) -> None:
        """Register a health check.

        Args:
            check: Health check to register
        """
        if check.name in self._checks_by_name:
            logger.warning("check_already_registered", check_name=check.name)
            return

        self._checks.append(check)
        self._checks_by_name[check.name] = check

        logger.debug("check_registered", check_name=check.name)

    def unregister(self, check_name: str) -> bool:
        """Unregister a health check.

        Args:
            check_name: Name of check to unregister

        Returns:
            True if check was found and removed
        """
        if check_name not in self._checks_by_name:
            logger.warning("check_not_found_for_unregister", check_name=check_name)
            return False

        check = self._checks_by_name.pop(check_name)
        self._checks.remove(check)

        logger.debug("check_unregistered", check_name=check_name)
        return True

    def get_check(self, check_name: str) -> Check | None:
        """Get a check by name.

        Args:
            check_name: Name of the check

        Returns:
            Check if found, None otherwise
        """
        return self._checks_by_name.get(check_name)

    def get_all_checks(self) -> list[Check]:
        """Get all registered checks in registration order.

        Returns:
            List of all registered checks
        """
        return self._checks.copy()

    def __len__(self) -> int:
        """Get number of registered checks."""
        return len(self._checks)


def default_registry() -> CheckRegistry:
    """Build the registry holding the standard Rook Ceph health checks.

    Returns:
        CheckRegistry with mon/osd placement, ceph health, pod status,
        placement group and mgr checks, in that order
    """
    from rookcheck.checks.ceph import (
        CephHealthCheck,
        DaemonPlacementCheck,
        MgrPodCheck,
        PlacementGroupCheck,
        PodStatusCheck,
    )

    registry = CheckRegistry()
    registry.register(DaemonPlacementCheck(DaemonRole.MON))
    registry.register(DaemonPlacementCheck(DaemonRole.OSD))
    registry.register(CephHealthCheck())
    registry.register(PodStatusCheck())
    registry.register(PlacementGroupCheck())
    registry.register(MgrPodCheck())
    return registry
