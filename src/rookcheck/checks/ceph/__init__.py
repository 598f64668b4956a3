"""Ceph cluster health checks."""

from rookcheck.checks.ceph.daemon_placement import DaemonPlacementCheck
from rookcheck.checks.ceph.health_status import CephHealthCheck
from rookcheck.checks.ceph.mgr_pods import MgrPodCheck
from rookcheck.checks.ceph.placement_groups import PlacementGroupCheck
from rookcheck.checks.ceph.pod_status import PodStatusCheck

__all__ = [
    "CephHealthCheck",
    "DaemonPlacementCheck",
    "MgrPodCheck",
    "PlacementGroupCheck",
    "PodStatusCheck",
]
