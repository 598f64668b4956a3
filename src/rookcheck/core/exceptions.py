"""Custom exceptions for rookcheck."""


class RookCheckError(Exception):
    """Base exception for all rookcheck errors."""


class ConfigurationError(RookCheckError):
    """Configuration-related errors."""


class KubernetesError(RookCheckError):
    """Kubernetes operation failed."""


class CephCommandError(RookCheckError):
    """Running a ceph command inside a pod failed."""


class StatusDecodeError(RookCheckError):
    """Ceph status output could not be decoded."""
