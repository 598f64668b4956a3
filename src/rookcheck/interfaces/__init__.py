"""Interfaces separating the health engine from Kubernetes and Ceph access."""

from rookcheck.interfaces.check import Check, CheckContext
from rookcheck.interfaces.exceptions import (
    InterfaceError,
    KubernetesProviderError,
)
from rookcheck.interfaces.kubernetes_provider import KubernetesProvider, PodInfo
from rookcheck.interfaces.report_sink import ReportSink
from rookcheck.interfaces.status_fetcher import StatusFetcher

__all__ = [
    "Check",
    "CheckContext",
    "InterfaceError",
    "KubernetesProvider",
    "KubernetesProviderError",
    "PodInfo",
    "ReportSink",
    "StatusFetcher",
]
