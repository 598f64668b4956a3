"""Exceptions for interface implementations."""


class InterfaceError(Exception):
    """Base exception for all interface-related errors."""


class KubernetesProviderError(InterfaceError):
    """Exception for Kubernetes provider operations."""
