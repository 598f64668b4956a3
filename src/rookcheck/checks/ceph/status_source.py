"""Fetch-and-decode step shared by the status-based checks."""

from rookcheck.ceph.status import decode_status
from rookcheck.core.exceptions import CephCommandError, StatusDecodeError
from rookcheck.core.models import (
    CephClusterTarget,
    ClusterStatusSnapshot,
    ReportEntry,
    Severity,
)
from rookcheck.interfaces.check import CheckContext
from rookcheck.utils.logging import get_logger

logger = get_logger(__name__)


async def load_snapshot(
    target: CephClusterTarget, context: CheckContext
) -> tuple[ClusterStatusSnapshot | None, ReportEntry | None]:
    """Fetch ceph status and decode it.

    Each call performs its own fetch. Failures are returned as a report entry
    so they stay scoped to the calling check.

    Args:
        target: Operator and cluster namespaces
        context: Check context with the status fetcher

    Returns:
        Tuple of (snapshot, None) on success or (None, failure entry)
    """
    try:
        raw = await context.status_fetcher.fetch_status(target)
    except CephCommandError as e:
        logger.error("ceph_status_fetch_failed", error=str(e))
        return None, ReportEntry(
            severity=Severity.ERROR, message=f"failed to fetch ceph status: {e}"
        )

    try:
        return decode_status(raw), None
    except StatusDecodeError as e:
        logger.error("ceph_status_decode_failed", error=str(e))
        return None, ReportEntry(
            severity=Severity.FATAL, message=f"failed to decode ceph status: {e}"
        )
