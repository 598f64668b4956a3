"""Adapter implementations for external services."""

from rookcheck.adapters.k8s_adapter import KubernetesAdapter

__all__ = [
    "KubernetesAdapter",
]
